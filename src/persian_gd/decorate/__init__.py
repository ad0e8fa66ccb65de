"""Text decorators applied to each line before drawing."""

from persian_gd.decorate.base import PlainStringDecorator, StringDecorator
from persian_gd.decorate.persian import PersianStringDecorator

__all__ = ["PersianStringDecorator", "PlainStringDecorator", "StringDecorator"]
