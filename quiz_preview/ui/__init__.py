"""Qt UI components for the quiz preview.

The main window is in ``quiz_preview.ui.quiz_preview_window`` (requires Qt WebEngine).
"""

from .dialog_helpers import confirm_leave_quiz, show_error

__all__ = [
    "confirm_leave_quiz",
    "show_error",
]
