from __future__ import annotations

import re
from typing import Optional

_LINE_ENDING = re.compile(r"\r\n|\r|\n")
_OPENING_FENCE = re.compile(r"```[a-zA-Z]*\r?\n")
_FENCE = re.compile(r"```")


def null_to_empty_string(value: Optional[str]) -> str:
    return "" if value is None else value


def nl2br(text: str) -> str:
    """Replace every line ending with ``<br>`` for HTML display."""
    return _LINE_ENDING.sub("<br>", text)


def remove_markdown_code_blocks(text: str) -> str:
    """
    Strip Markdown code fences, keeping the enclosed content.

    Opening fences may carry a language tag (```html); the line ending right
    after them goes too. Any remaining triple backticks are closing fences.
    """
    text = _OPENING_FENCE.sub("", text)
    return _FENCE.sub("", text)
