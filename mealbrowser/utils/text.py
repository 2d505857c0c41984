"""
Text helpers for markup generation and provider string cleanup.

Pure functions with no I/O. Everything that ends up inside HTML produced by the
presenter goes through escape_html first.
"""

import html
import re
from typing import Any, Optional

_WHITESPACE_RUN = re.compile(r"\s+")


def escape_html(value: Any) -> str:
    """
    Escape a value for safe insertion into HTML text or a quoted attribute.

    Converts &, <, >, " and ' to entities so provider or user supplied text is
    never interpreted as markup. None renders as an empty string.

    Examples:
        >>> escape_html("O'Brien's <Stew>")
        'O&#x27;Brien&#x27;s &lt;Stew&gt;'
    """
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def collapse_whitespace(value: Optional[str]) -> str:
    """Collapse whitespace runs to a single space and trim both ends."""
    if not value:
        return ""
    return _WHITESPACE_RUN.sub(" ", value).strip()


def escape_multiline(value: Optional[str]) -> str:
    """
    Escape free text and keep its line breaks as <br> tags.

    The text is trimmed first; Windows line endings count as one break.
    """
    text = (value or "").strip().replace("\r\n", "\n").replace("\r", "\n")
    return escape_html(text).replace("\n", "<br>")
