from import_fences.tui.renderers import FenceConsoleUI

__all__ = ["FenceConsoleUI"]
