# dispatcher.py

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from .exceptions import StyleNotFound
from .logger import Logger

if TYPE_CHECKING:
    from .element import Element

Operation = Callable[["Element", re.Match], "Element"]


@dataclass(frozen=True)
class StyleRule:
    """
    Maps one family of utility classes to an element operation.

    The pattern must match the whole token; its named groups are handed
    to apply() together with the element.
    """
    form: str
    pattern: re.Pattern
    apply: Operation


def _shade(match: re.Match) -> int:
    return int(match['shade']) if match['shade'] else 0


def _color_rule(prefix: str, method: str) -> StyleRule:
    return StyleRule(
        form=f"{prefix}-{{color}}[-{{shade}}]",
        pattern=re.compile(rf'{prefix}-(?P<color>[a-z]+)(?:-(?P<shade>\d+))?'),
        apply=lambda element, match: getattr(element, method)(match['color'], _shade(match)),
    )


def _numeric_rule(prefix: str, method: str) -> StyleRule:
    return StyleRule(
        form=f"{prefix}-{{n}}",
        pattern=re.compile(rf'{re.escape(prefix)}-(?P<value>\d+)'),
        apply=lambda element, match: getattr(element, method)(int(match['value'])),
    )


# Tokens that map straight onto a method without arguments
SIMPLE_STYLES: Dict[str, str] = {
    'font-bold': 'font_bold',
    'underline': 'underline',
    'italic': 'italic',
    'line-through': 'line_through',
    'invisible': 'invisible',
    'uppercase': 'uppercase',
    'lowercase': 'lowercase',
    'capitalize': 'capitalize',
    'snakecase': 'snakecase',
    'truncate': 'truncate',
}

_NUMERIC_STYLES: Tuple[Tuple[str, str], ...] = (
    ('m', 'm'), ('mx', 'mx'), ('my', 'my'),
    ('mt', 'mt'), ('mb', 'mb'), ('ml', 'ml'), ('mr', 'mr'),
    ('p', 'p'), ('px', 'px'), ('pl', 'pl'), ('pr', 'pr'),
    ('w', 'width'), ('truncate', 'truncate'),
)

STYLE_RULES: Tuple[StyleRule, ...] = (
    _color_rule('bg', 'bg'),
    _color_rule('text', 'text_color'),
    *(_numeric_rule(prefix, method) for prefix, method in _NUMERIC_STYLES),
)


class StyleDispatcher:
    """
    Applies utility-class strings such as "bg-red-500 mt-2 font-bold"
    to an element, one token at a time, left to right.
    """
    def __init__(self, rules: Tuple[StyleRule, ...] = STYLE_RULES,
                 simple: Optional[Dict[str, str]] = None,
                 logger: Optional[Logger] = None):
        self.rules = rules
        self.simple = dict(SIMPLE_STYLES if simple is None else simple)
        self.logger = logger or Logger(__name__)

    def tokens(self) -> List[str]:
        """Return every supported token form."""
        return list(self.simple) + [rule.form for rule in self.rules]

    def resolve(self, token: str) -> Callable[["Element"], "Element"]:
        """
        Find the operation for a single token.

        Raises:
            StyleNotFound: If no table entry matches the token
        """
        method = self.simple.get(token)
        if method is not None:
            return lambda element: getattr(element, method)()
        for rule in self.rules:
            match = rule.pattern.fullmatch(token)
            if match:
                return lambda element: rule.apply(element, match)
        self.logger.debug(f"No style matches token '{token}'")
        raise StyleNotFound(token)

    def apply(self, element: "Element", styles: str) -> "Element":
        """Fold the element through every token in styles."""
        for token in styles.split():
            self.logger.debug(f"Applying style '{token}'")
            element = self.resolve(token)(element)
        return element


_default_dispatcher: Optional[StyleDispatcher] = None


def apply_styles(element: "Element", styles: str) -> "Element":
    """Apply styles with the shared default dispatcher."""
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = StyleDispatcher()
    return _default_dispatcher.apply(element, styles)
