"""Preview rendering for questions being authored."""

from __future__ import annotations

from poliplay.core.markdown_renderer import renderer
from poliplay.core.models import QuestionKind


def render_question_preview(
    question_text: str,
    kind: QuestionKind | None,
    options: list[str],
    correct_answer: str,
) -> str:
    """Render the draft question as HTML for the QWebEngineView preview.

    Options are only shown for multiple choice drafts; the answer line follows
    the same format as the question list.
    """
    if kind is QuestionKind.MULTIPLE_CHOICE:
        hint = f"Answer: {correct_answer}" if correct_answer else None
        return renderer.render_preview_document(question_text, options=options, answer_hint=hint)
    hint = f"Answer: {correct_answer.strip()}" if correct_answer.strip() else None
    return renderer.render_preview_document(question_text, answer_hint=hint)
