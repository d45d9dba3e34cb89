# __init__.py

from .logger import Logger
from .exceptions import TermstyleError, UnknownColorVariant, StyleNotFound
from .palette import PALETTE, resolve_variant
from .properties import StyleProperties, merge
from .output import OutputSink, StreamOutput, BufferedOutput
from .element import Element, Renderable
from .dispatcher import StyleDispatcher, apply_styles
from .interface import Styler

__all__ = [
    "Styler", "Element", "Renderable", "StyleProperties", "StyleDispatcher",
    "OutputSink", "StreamOutput", "BufferedOutput", "Logger",
    "TermstyleError", "UnknownColorVariant", "StyleNotFound",
    "PALETTE", "resolve_variant", "merge", "apply_styles",
]
