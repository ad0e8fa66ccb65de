"""The decorator contract and the identity decorator."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StringDecorator(Protocol):
    """
    Rewrites a line of text just before it is drawn.
    
    Implementations must be pure and accept any string.
    """
    
    def decorate(self, text: str, use_local_digits: bool) -> str:
        ...


class PlainStringDecorator:
    """Draw lines exactly as given."""
    
    def decorate(self, text: str, use_local_digits: bool) -> str:
        return text
