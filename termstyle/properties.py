# properties.py

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .definitions import COLOR_ROLES, DEFAULT_PROPERTIES, SPACING_KEYS

History = Tuple[str, ...]


def _as_history(value: Any) -> History:
    """Normalize a scalar or a sequence of values to a tuple."""
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    return (str(value),)


def accumulate(base: Mapping[str, History], patch: Mapping[str, History]) -> Dict[str, History]:
    """Append the patch history after the base history for every key."""
    merged = dict(base)
    for key, values in patch.items():
        merged[key] = merged.get(key, ()) + tuple(values)
    return merged


def overwrite(base: Mapping[str, int], patch: Mapping[str, int]) -> Dict[str, int]:
    """Replace base values with patch values key by key."""
    merged = dict(base)
    merged.update(patch)
    return merged


def merge_tree(base: Mapping[str, Any], patch: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two nested mappings without touching either.

    Lists are concatenated, mappings are merged key by key and any other
    patch value replaces the base value.
    """
    merged = dict(base)
    for key, value in patch.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_tree(current, value)
        elif isinstance(current, (list, tuple)) and isinstance(value, (list, tuple)):
            merged[key] = list(current) + list(value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class StyleProperties:
    """
    Style metadata attached to an element.

    The tree is never changed after construction. Colors, options and
    links keep their full history; readers take the last entry.
    Spacing keys hold a single integer each. Mapping fields are exposed
    read-only.
    """
    colors: Mapping[str, History] = field(default_factory=dict)
    options: Tuple[str, ...] = ()
    styles: Mapping[str, int] = field(default_factory=dict)
    href: History = ()
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        for name in ('colors', 'styles', 'extra'):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        object.__setattr__(self, 'options', tuple(self.options))
        object.__setattr__(self, 'href', tuple(self.href))

    def __hash__(self) -> int:
        # extra may hold lists, so it is left out of the hash
        return hash((
            tuple(sorted(self.colors.items())),
            self.options,
            tuple(sorted(self.styles.items())),
            self.href,
        ))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None) -> "StyleProperties":
        """
        Build properties from the nested-dict form.

        Example:
            {'colors': {'fg': 'red'}, 'options': ['bold'], 'styles': {'mt': 1}}
        """
        data = dict(data or {})
        colors = {role: _as_history(value) for role, value in dict(data.pop('colors', {})).items()}
        options = _as_history(data.pop('options', ()))
        styles = {key: int(value) for key, value in dict(data.pop('styles', {})).items()}
        href = _as_history(data.pop('href', None))
        return cls(colors=colors, options=options, styles=styles, href=href, extra=data)

    @classmethod
    def default(cls) -> "StyleProperties":
        return cls.from_dict(DEFAULT_PROPERTIES)

    def to_dict(self) -> Dict[str, Any]:
        """Return the nested-dict form of the tree."""
        result: Dict[str, Any] = {
            'colors': {role: list(values) for role, values in self.colors.items()},
            'options': list(self.options),
        }
        if self.styles:
            result['styles'] = dict(self.styles)
        if self.href:
            result['href'] = list(self.href)
        result.update(self.extra)
        return result

    def merge(self, patch: Union["StyleProperties", Mapping[str, Any]]) -> "StyleProperties":
        """Return a new tree with the patch merged on top of this one."""
        if not isinstance(patch, StyleProperties):
            patch = StyleProperties.from_dict(patch)
        return StyleProperties(
            colors=accumulate(self.colors, patch.colors),
            options=self.options + patch.options,
            styles=overwrite(self.styles, patch.styles),
            href=self.href + patch.href,
            extra=merge_tree(self.extra, patch.extra),
        )

    def color(self, role: str) -> Optional[str]:
        """Return the authoritative color for a role, if any."""
        values = self.colors.get(role, ())
        return values[-1] if values else None

    def link(self) -> Optional[str]:
        return self.href[-1] if self.href else None

    def spacing(self, key: str) -> int:
        return int(self.styles.get(key, 0))

    def color_tokens(self) -> Iterable[str]:
        """Yield "role=value" for every role that carries a color."""
        for role in COLOR_ROLES:
            value = self.color(role)
            if value is not None:
                yield f"{role}={value}"

    def margins(self) -> Dict[str, int]:
        return {key: self.spacing(key) for key in SPACING_KEYS}


def merge(base: StyleProperties, patch: Union[StyleProperties, Mapping[str, Any]]) -> StyleProperties:
    """Merge patch on top of base; neither argument is modified."""
    return base.merge(patch)
