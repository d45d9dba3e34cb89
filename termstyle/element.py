# element.py

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Protocol, Union

from . import text
from .definitions import DEFAULT_ELLIPSIS, wrap
from .output import OutputSink, StreamOutput
from .palette import resolve_variant
from .properties import StyleProperties

PropertiesLike = Union[StyleProperties, Mapping[str, Any]]

# Sink for elements created without one
DEFAULT_OUTPUT = StreamOutput()


class Renderable(Protocol):
    """Anything that can serialize itself to markup and hand it to a sink."""
    def to_string(self) -> str: ...
    def render(self) -> None: ...


@dataclass(frozen=True)
class Element:
    """
    Immutable styled text fragment.

    Every style method returns a new Element; the receiver is left as
    it was. Padding and text transforms are applied to the content right
    away, while colors, options and margins stay as properties until
    to_string() builds the markup.
    """
    content: str
    properties: StyleProperties = field(default_factory=StyleProperties.default)
    output: Optional[OutputSink] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.properties, StyleProperties):
            object.__setattr__(self, 'properties', StyleProperties.from_dict(self.properties))

    @classmethod
    def from_styles(cls, content: str, styles: str, output: Optional[OutputSink] = None) -> "Element":
        """Create an element and apply a space-separated list of utility classes."""
        from .dispatcher import apply_styles
        return apply_styles(cls(content, output=output), styles)

    def _with_content(self, content: str) -> "Element":
        return replace(self, content=content)

    def with_properties(self, properties: PropertiesLike) -> "Element":
        """Return a copy with the given properties merged in."""
        return replace(self, properties=self.properties.merge(properties))

    # Colors and options

    def bg(self, color: str, shade: int = 0) -> "Element":
        """Set the background color, optionally a numbered shade of it."""
        if shade > 0:
            color = resolve_variant(color, shade)
        return self.with_properties({'colors': {'bg': color}})

    def text_color(self, color: str, shade: int = 0) -> "Element":
        """Set the foreground color, optionally a numbered shade of it."""
        if shade > 0:
            color = resolve_variant(color, shade)
        return self.with_properties({'colors': {'fg': color}})

    def font_bold(self) -> "Element":
        return self.with_properties({'options': ['bold']})

    def underline(self) -> "Element":
        return self.with_properties({'options': ['underscore']})

    def href(self, target: str) -> "Element":
        """Turn the element into a link to target."""
        return self.with_properties({'href': target})

    # Raw ANSI effects, baked into the content

    def italic(self) -> "Element":
        return self._with_content(wrap(self.content, 'ITALIC_ON'))

    def line_through(self) -> "Element":
        return self._with_content(wrap(self.content, 'STRIKE_ON'))

    def invisible(self) -> "Element":
        return self._with_content(wrap(self.content, 'CONCEAL_ON'))

    # Margins

    def ml(self, margin: int) -> "Element":
        return self.with_properties({'styles': {'ml': margin}})

    def mr(self, margin: int) -> "Element":
        return self.with_properties({'styles': {'mr': margin}})

    def mt(self, margin: int) -> "Element":
        return self.with_properties({'styles': {'mt': margin}})

    def mb(self, margin: int) -> "Element":
        return self.with_properties({'styles': {'mb': margin}})

    def mx(self, margin: int) -> "Element":
        """Set the left and right margins."""
        return self.with_properties({'styles': {'ml': margin, 'mr': margin}})

    def my(self, margin: int) -> "Element":
        """Set the top and bottom margins."""
        return self.with_properties({'styles': {'mt': margin, 'mb': margin}})

    def m(self, margin: int) -> "Element":
        return self.my(margin).mx(margin)

    # Padding

    def pl(self, padding: int) -> "Element":
        return self._with_content(' ' * padding + self.content)

    def pr(self, padding: int) -> "Element":
        return self._with_content(self.content + ' ' * padding)

    def px(self, padding: int) -> "Element":
        return self.p(padding)

    def p(self, padding: int) -> "Element":
        return self.pl(padding).pr(padding)

    # Content transforms

    def truncate(self, limit: Optional[int] = None, ellipsis: str = DEFAULT_ELLIPSIS) -> "Element":
        """
        Cut the content to fit in limit columns, ending with ellipsis.

        Without a limit the content is left as it is.
        """
        if limit is None:
            return self._with_content(self.content)
        return self._with_content(text.truncate(self.content, limit, ellipsis))

    def width(self, width: int) -> "Element":
        """Pad or crop the content to exactly width columns."""
        return self._with_content(text.fixed_width(self.content, width))

    def uppercase(self) -> "Element":
        return self._with_content(text.uppercase(self.content))

    def lowercase(self) -> "Element":
        return self._with_content(text.lowercase(self.content))

    def capitalize(self) -> "Element":
        return self._with_content(text.capitalize(self.content))

    def snakecase(self) -> "Element":
        return self._with_content(text.snakecase(self.content))

    # Output

    def to_string(self) -> str:
        """Build the markup string for the element."""
        props = self.properties
        margins = props.margins()
        link = props.link()
        return '%s%s<%s%s;options=%s>%s</>%s%s' % (
            '\n' * margins['mt'],
            ' ' * margins['ml'],
            f"href={link};" if link is not None else '',
            ';'.join(props.color_tokens()),
            ','.join(props.options),
            self.content,
            ' ' * margins['mr'],
            '\n' * margins['mb'],
        )

    def render(self) -> None:
        """Write the markup to the element's output sink."""
        output = self.output if self.output is not None else DEFAULT_OUTPUT
        output.write(self.to_string())

    def __str__(self) -> str:
        return self.to_string()
