"""Fluent image creation."""

from persian_gd.create.builder import OPTION_FIELDS, ImageBuilder

__all__ = ["ImageBuilder", "OPTION_FIELDS"]
