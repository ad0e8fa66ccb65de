"""Exceptions raised by persian-gd."""


class PersianGDError(Exception):
    """Base class for all persian-gd errors."""


class InvalidColorFormat(PersianGDError, ValueError):
    """Raised when a color is not a ``#RGB`` or ``#RRGGBB`` hex string."""
    
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid hexadecimal color code provided: {value!r}")
