"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides come from TODO_* environment variables or the .env file.
"""
from __future__ import annotations
import os, sys
from todo_config import lookup, read_env_file

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)

def _palette(key: str, default: str) -> str:
    value = lookup(key, default, env_file=_ENV_FILE)
    return '#' + value.lstrip('#') if _is_hex(value) else default

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_PENDING_DEFAULT = '#48B3AF'
HEX_COMPLETED_DEFAULT = '#A7E399'

_ENV_FILE = read_env_file()
HEX_PRIMARY = _palette('TODO_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_PENDING = _palette('TODO_PENDING', HEX_PENDING_DEFAULT)
HEX_COMPLETED = _palette('TODO_COMPLETED', HEX_COMPLETED_DEFAULT)

PRIMARY = _from_hex(HEX_PRIMARY)
STATUS_COLOR = {
    'Pending': _from_hex(HEX_PENDING),
    'Completed': _from_hex(HEX_COMPLETED),
}
HEADER_COLOR = PRIMARY
EMPTY_COLOR = DIM + PRIMARY

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','RESET','BOLD','DIM','STATUS_COLOR','HEADER_COLOR','EMPTY_COLOR',
    'HEX_PRIMARY','HEX_PENDING','HEX_COMPLETED','_ENABLE','_USE_TRUECOLOR','_FORCE'
]
