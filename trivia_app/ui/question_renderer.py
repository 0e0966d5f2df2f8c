"""Question rendering utilities for displaying trivia questions."""

from __future__ import annotations

import html


def render_question_html(question_text: str, font_size: int = 14) -> str:
    """Wrap provider question text for a rich-text ``QLabel``.

    The text already carries HTML entities (``&quot;``, ``&#039;``) and is
    passed through untouched so the label decodes them.
    """
    body = question_text.strip() or "<em>(No question text)</em>"
    return f'<div style="font-size: {font_size}pt;">{body}</div>'


def choice_display_text(choice: str) -> str:
    """Plain text for a choice button; buttons do not render markup."""
    return html.unescape(choice)
