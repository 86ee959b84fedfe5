"""Qt UI components for the question generator console."""

from .dialog_helpers import (
    confirm_delete_question,
    show_error,
    show_info,
    show_warning,
)
from .generator_main_window import GeneratorMainWindow
from .question_renderer import render_question_preview

__all__ = [
    "GeneratorMainWindow",
    "confirm_delete_question",
    "show_error",
    "show_info",
    "show_warning",
    "render_question_preview",
]
