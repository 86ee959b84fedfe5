from __future__ import annotations

from poliplay.core.markdown_renderer import MarkdownRenderer


def test_fragment_renders_markdown() -> None:
    html = MarkdownRenderer().render_fragment("What does **habeas corpus** mean?")

    assert "<strong>habeas corpus</strong>" in html


def test_empty_fragment_has_placeholder() -> None:
    assert "No content provided" in MarkdownRenderer().render_fragment("   ")


def test_raw_html_is_escaped_by_default() -> None:
    html = MarkdownRenderer().render_fragment("<script>alert(1)</script>")

    assert "<script>" not in html


def test_preview_lists_options_and_answer() -> None:
    document = MarkdownRenderer().render_preview_document(
        "Who is the chief executive?",
        options=["President", "Vice President", "Speaker", "<b>Chief Justice</b>"],
        answer_hint="Answer: A",
    )

    assert "<strong>A.</strong> President" in document
    assert "<strong>D.</strong> &lt;b&gt;Chief Justice&lt;/b&gt;" in document
    assert "Answer: A" in document
