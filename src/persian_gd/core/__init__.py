"""Core data structures: colors and line storage."""

from persian_gd.core.color import ColorAllocation, decode_color
from persian_gd.core.lines import LineStore

__all__ = ["ColorAllocation", "LineStore", "decode_color"]
