"""
Color helpers: CSS hex normalization and the highlight palette lookup.

WordprocessingML highlights only accept a fixed set of named colors, so
background colors are bucketed onto that palette.
"""

import re

HEX_RE = re.compile(r'^[0-9A-Fa-f]{3}$|^[0-9A-Fa-f]{6}$')

# Ascending, contiguous and inclusive on both ends: a value sitting on a
# boundary belongs to the first bucket that lists it.
HIGHLIGHT_BOUNDARIES = (
    (0x000000, 0x000080, 'black'),
    (0x000080, 0x0000FF, 'darkBlue'),
    (0x0000FF, 0x008000, 'blue'),
    (0x008000, 0x008080, 'darkGreen'),
    (0x008080, 0x00FF00, 'darkCyan'),
    (0x00FF00, 0x00FFFF, 'green'),
    (0x00FFFF, 0x800000, 'cyan'),
    (0x800000, 0x800080, 'darkRed'),
    (0x800080, 0x808000, 'darkMagenta'),
    (0x808000, 0x808080, 'darkYellow'),
    (0x808080, 0xC0C0C0, 'darkGray'),
    (0xC0C0C0, 0xFF0000, 'lightGray'),
    (0xFF0000, 0xFF00FF, 'red'),
    (0xFF00FF, 0xFFFF00, 'magenta'),
    (0xFFFF00, 0xFFFFFF, 'yellow'),
)
HIGHLIGHT_FALLBACK = 'white'

HIGHLIGHT_NAMES = tuple(name for _, _, name in HIGHLIGHT_BOUNDARIES) + (HIGHLIGHT_FALLBACK,)


def normalize_hex(value):
    """Strip '#', ';' and spaces from a CSS color and expand 3-digit shorthand.

    Raises ValueError if what remains is not a 3 or 6 digit hex color.
    """
    digits = re.sub(r'[#; ]', '', value)
    if not HEX_RE.match(digits):
        raise ValueError(f"Not a hex color: {value!r}")
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    return digits


def highlight_from_hex(value):
    """Map a 24-bit color (int or hex string) to a highlight color name."""
    if isinstance(value, str):
        value = int(normalize_hex(value), 16)
    if value < 0:
        raise ValueError(f"Negative color value: {value}")

    for low, high, name in HIGHLIGHT_BOUNDARIES:
        if low <= value <= high:
            return name
    return HIGHLIGHT_FALLBACK
