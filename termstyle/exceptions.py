# exceptions.py


class TermstyleError(Exception):
    """Base class for every error raised by termstyle."""


class UnknownColorVariant(TermstyleError, LookupError):
    """
    Raised when a numbered shade of a color is not in the palette.

    Attributes:
        color: Color name as requested (e.g. "red")
        shade: Requested shade (e.g. 999)
        key: Uppercased palette key that was looked up (e.g. "RED_999")
    """
    def __init__(self, color: str, shade: int):
        self.color = color
        self.shade = shade
        self.key = f"{color}_{shade}".upper()
        super().__init__(f"Color [{self.key}] not found.")


class StyleNotFound(TermstyleError, ValueError):
    """Raised when a utility-class token has no matching operation."""
    def __init__(self, style: str):
        self.style = style
        super().__init__(f"Style [{style}] not found.")
