"""Colour transforms and settings value parsers.

Colours are plain ints in 0xRRGGBB order, the order used by settings files
and the compiled catalogs. Parsers return None for anything they cannot
read so the fallback chain can treat malformed text as absent.
"""

import re
from typing import Optional

COLOR_MASK = 0xFFFFFF

_HEX_COLOR = re.compile(r'^(?:0[xX]|#)([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')

_TRUE_WORDS = {'true', 'yes', 'on', '1'}
_FALSE_WORDS = {'false', 'no', 'off', '0'}


def rotate(color: int) -> int:
    """Swap the low and high bytes: 0xRRGGBB <-> 0xBBGGRR."""
    color &= COLOR_MASK
    return ((color & 0xFF0000) >> 16) | (color & 0x00FF00) | ((color & 0x0000FF) << 16)


def invert(color: int, enabled: bool = True) -> int:
    """Photographic negative of a colour, or the colour itself when disabled."""
    color &= COLOR_MASK
    if not enabled:
        return color
    return color ^ COLOR_MASK


def parse_color(text: Optional[str]) -> Optional[int]:
    """Parse '0xRRGGBB', '#RRGGBB' or the three digit short forms."""
    if text is None:
        return None
    match = _HEX_COLOR.match(text.strip())
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    return int(digits, 16)


def parse_bool(text: Optional[str]) -> Optional[bool]:
    if text is None:
        return None
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return None


def parse_int(text: Optional[str]) -> Optional[int]:
    """Read a leading base-10 integer ('12px' -> 12). No digits -> None."""
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def format_color(color: int) -> str:
    return f"#{color & COLOR_MASK:06x}"
