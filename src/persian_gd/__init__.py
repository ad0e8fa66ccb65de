"""
persian-gd: render lines of (Persian) text to PNG

Quick Start:
    >>> import persian_gd as pgd
    >>> png = (pgd.create()
    ...     .set_font("Vazirmatn-Regular.ttf")
    ...     .set_output_image(True)
    ...     .add_lines(["سلام", "شماره ۱۲"])
    ...     .build())

Features:
    - Fluent builder with deferred validation
    - #RGB / #RRGGBB background and text colors
    - Canvas height derived from the number of lines
    - Per-line decorator (Persian digits by default)
    - Output as in-memory PNG bytes or as a file
"""

__version__ = "0.1.0"

import logging
from typing import Any, Mapping

from persian_gd.core.color import ColorAllocation, decode_color
from persian_gd.core.lines import LineStore
from persian_gd.create.builder import ImageBuilder
from persian_gd.decorate import PersianStringDecorator, PlainStringDecorator, StringDecorator
from persian_gd.errors import InvalidColorFormat, PersianGDError
from persian_gd.render.output import ImageBytes, ImageFile, OutputMode

logging.getLogger(__name__).addHandler(logging.NullHandler())


def create(options: Mapping[str, Any] | None = None) -> ImageBuilder:
    """Start a new image with the fluent builder API."""
    return ImageBuilder(options)


__all__ = [
    # Version
    "__version__",
    # Building
    "create",
    "ImageBuilder",
    "ImageBytes",
    "ImageFile",
    "OutputMode",
    # Colors and lines
    "ColorAllocation",
    "LineStore",
    "decode_color",
    # Decorators
    "StringDecorator",
    "PersianStringDecorator",
    "PlainStringDecorator",
    # Errors
    "PersianGDError",
    "InvalidColorFormat",
]
