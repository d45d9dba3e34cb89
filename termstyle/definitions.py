# definitions.py

from typing import Dict, Tuple

FMT = lambda x: f'\033[{x}m'  # Core formatting utility

FORMATS: Dict[str, str] = {
    'RESET': FMT('0'),
    'ITALIC_ON': FMT('3'),
    'CONCEAL_ON': FMT('8'),
    'STRIKE_ON': FMT('9'),
}

# Roles read from the colors tree, in render order
COLOR_ROLES: Tuple[str, ...] = ('fg', 'bg')

SPACING_KEYS: Tuple[str, ...] = ('mt', 'mb', 'ml', 'mr')

DEFAULT_ELLIPSIS = '...'

# Characters stripped from the right edge after a crop
TRIM_CHARS = ' \t\n\r\0\x0b'

DEFAULT_PROPERTIES = {
    'colors': {
        'bg': 'default',
    },
    'options': [],
}


def wrap(content: str, name: str) -> str:
    """Wrap content between a named format and a reset."""
    return f"{FORMATS[name]}{content}{FORMATS['RESET']}"
