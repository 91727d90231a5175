from enum import Enum

from import_fences.models import MessageId


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


MESSAGE_STYLE = {
    MessageId.EXPECTED_ONE_RULE: UIStyle.YELLOW.value,
    MessageId.IMPORT_NOT_ALLOWED: UIStyle.RED.value,
    MessageId.IMPORT_FORBIDDEN: UIStyle.MAGENTA.value,
}
