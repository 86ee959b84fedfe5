"""Markdown rendering shared by the browser player and the generator preview."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt

from poliplay.constants.quiz_constants import OPTION_LETTERS


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts question markdown into HTML fragments or preview documents.

    Raw HTML in the source is escaped unless ``enable_html`` is set, since
    question text is typed by administrators and shown to every player.
    """

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_preview_document(
        self,
        question_text: str,
        options: list[str] | None = None,
        answer_hint: str | None = None,
        title: str = "PoliPlay",
    ) -> str:
        """Render a full HTML page previewing a question as players will see it."""
        body = [f'<div class="question-html">{self.render_fragment(question_text)}</div>']
        if options:
            items = "".join(
                f"<li><strong>{letter}.</strong> {escape(option) or '<em>(empty)</em>'}</li>"
                for letter, option in zip(OPTION_LETTERS, options)
            )
            body.append(f'<ul class="options">{items}</ul>')
        if answer_hint:
            body.append(f'<p class="answer">{escape(answer_hint)}</p>')
        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{escape(title)}</title>
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; color: #1f2937; }}
      .question-html {{ font-size: 1.1rem; line-height: 1.5; }}
      .options {{ list-style: none; padding: 0; }}
      .options li {{ padding: 0.35rem 0; }}
      .answer {{ color: #059669; font-weight: 600; }}
    </style>
  </head>
  <body>
    {''.join(body)}
  </body>
</html>"""


# Shared instance; MarkdownIt renders are read-only so the API thread and the
# Qt thread can both use it.
renderer = MarkdownRenderer()
