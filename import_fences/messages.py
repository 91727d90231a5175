from typing import Final

from import_fences.models import MessageId


MESSAGES: Final[dict[MessageId, str]] = {
    MessageId.EXPECTED_ONE_RULE: (
        "Expected exactly 1 import-fences rule for {filename}. "
        "Got: {matchingRules}. "
        "Modify the import-fences config to add a policy for this directory."
    ),
    MessageId.IMPORT_NOT_ALLOWED: (
        "{importingTo} disallows importing from all packages and modules "
        "other than: {allowedFolders}. "
        "If this import should be allowed, you can add it in the "
        "import-fences config."
    ),
    MessageId.IMPORT_FORBIDDEN: (
        "{importingTo} forbids importing from: {forbiddenFolders}. "
        "Remove the import or move the code behind an allowed boundary."
    ),
}


def render_message(message_id: MessageId, data: dict[str, str]) -> str:
    return MESSAGES[message_id].format(**data)
