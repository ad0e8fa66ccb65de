"""Persian digit localization."""

# Western (0-9) and Arabic-Indic (U+0660..U+0669) digits to Persian (U+06F0..U+06F9)
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
ASCII_DIGITS = "0123456789"

_TO_PERSIAN = str.maketrans(
    ASCII_DIGITS + ARABIC_INDIC_DIGITS,
    PERSIAN_DIGITS * 2,
)
_TO_ASCII = str.maketrans(ARABIC_INDIC_DIGITS, ASCII_DIGITS)


class PersianStringDecorator:
    """
    Default decorator for Persian text.
    
    With local digits on, every ASCII or Arabic-Indic digit becomes its
    Persian form. With local digits off, Arabic-Indic digits are folded
    back to ASCII and Persian digits are left alone.
    
    Letter joining and right-to-left ordering are not done here; Pillow's
    layout engine handles them when it is built with libraqm.
    
    Example:
        >>> PersianStringDecorator().decorate("صفحه 12", True)
        'صفحه ۱۲'
    """
    
    def decorate(self, text: str, use_local_digits: bool) -> str:
        if use_local_digits:
            return text.translate(_TO_PERSIAN)
        return text.translate(_TO_ASCII)
