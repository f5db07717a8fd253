"""Qt UI components for the reader application."""

from .dialog_helpers import (
    confirm_leave_assessment,
    show_error,
    show_info,
    show_warning,
)
from .reader_main_window import ReaderMainWindow

__all__ = [
    "ReaderMainWindow",
    "confirm_leave_assessment",
    "show_error",
    "show_info",
    "show_warning",
]
