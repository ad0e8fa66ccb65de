"""Hex color decoding and per-canvas color allocations."""

import string
from dataclasses import dataclass

from persian_gd.errors import InvalidColorFormat


HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class ColorAllocation:
    """
    A decoded color bound to a canvas.
    
    The handle is the index the canvas assigned when the color was
    allocated. It only means something to the canvas that issued it.
    """
    red: int
    green: int
    blue: int
    handle: int
    
    @property
    def rgb(self) -> tuple[int, int, int]:
        """Return the (red, green, blue) triple."""
        return (self.red, self.green, self.blue)


def decode_color(hex_color: str) -> tuple[int, int, int]:
    """
    Decode a ``#RGB`` or ``#RRGGBB`` string into three 0-255 channels.
    
    Short form duplicates each digit, so ``#abc`` decodes the same
    as ``#aabbcc``. Case does not matter.
    
    Raises:
        InvalidColorFormat: missing ``#``, wrong digit count, or a
            character that is not a hex digit.
    """
    if not isinstance(hex_color, str) or not hex_color.startswith("#"):
        raise InvalidColorFormat(hex_color)
    
    body = hex_color[1:]
    if len(body) == 3:
        pairs = [digit * 2 for digit in body]
    elif len(body) == 6:
        pairs = [body[0:2], body[2:4], body[4:6]]
    else:
        raise InvalidColorFormat(hex_color)
    
    if not all(char in HEX_DIGITS for char in body):
        raise InvalidColorFormat(hex_color)
    
    red, green, blue = (int(pair, 16) for pair in pairs)
    return (red, green, blue)
