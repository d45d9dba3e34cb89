# text.py

import re
from rich.cells import cell_len

from .definitions import DEFAULT_ELLIPSIS, TRIM_CHARS

# A run of letters, an inner apostrophe does not start a new word
_WORD = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")

_SNAKE_PATTERNS = (
    re.compile(r'([a-z\d])([A-Z])'),
    re.compile(r'([^_])([A-Z][a-z])'),
)


def display_width(text: str) -> int:
    """Return the number of terminal columns the text occupies."""
    return cell_len(text)


def crop(text: str, width: int) -> str:
    """
    Return the longest prefix of text that fits in the given columns.

    A wide character that would straddle the limit is dropped rather
    than split.
    """
    if width <= 0:
        return ""
    used = 0
    for index, char in enumerate(text):
        used += cell_len(char)
        if used > width:
            return text[:index]
    return text


def truncate(text: str, limit: int, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """
    Shorten text so it fits in limit columns, ellipsis included.

    Text that already fits is returned unchanged.
    """
    limit -= display_width(ellipsis)
    if display_width(text) <= limit:
        return text
    return crop(text, limit).rstrip(TRIM_CHARS) + ellipsis


def fixed_width(text: str, width: int) -> str:
    """
    Pad or crop text to the given width.

    Padding counts codepoints while cropping counts columns, so text with
    wide characters can come out wider than the target.
    """
    length = len(text)
    if length <= width:
        return text + ' ' * (width - length)
    return crop(text, width).rstrip(TRIM_CHARS)


def uppercase(text: str) -> str:
    return text.upper()


def lowercase(text: str) -> str:
    return text.lower()


def capitalize(text: str) -> str:
    """Title-case every word; "it's" stays "It's"."""
    return _WORD.sub(lambda match: match[0].capitalize(), text)


def snakecase(text: str) -> str:
    """Convert CamelCase / camelCase text to snake_case."""
    for pattern in _SNAKE_PATTERNS:
        text = pattern.sub(r'\1_\2', text)
    return text.lower()
