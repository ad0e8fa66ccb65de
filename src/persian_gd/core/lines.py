"""Ordered storage for the text lines of an image."""

from typing import Iterable, Iterator


class LineStore:
    """
    Text lines in rendering order.
    
    Bulk insertion drops anything that is not a ``str``, so a store
    filled through ``extend`` or ``replace`` only ever holds text.
    """
    
    def __init__(self, lines: Iterable[object] = ()):
        self._lines: list[str] = []
        self.extend(lines)
    
    def append(self, line: object) -> None:
        """Append a single line, converting it to text if it is not already."""
        self._lines.append(line if isinstance(line, str) else str(line))
    
    def extend(self, lines: Iterable[object]) -> int:
        """Append every ``str`` in ``lines``; return how many were kept."""
        kept = [line for line in lines if isinstance(line, str)]
        self._lines.extend(kept)
        return len(kept)
    
    def replace(self, lines: Iterable[object]) -> int:
        """Discard the current lines and load ``lines`` instead."""
        self._lines.clear()
        return self.extend(lines)
    
    def clear(self) -> None:
        self._lines.clear()
    
    def as_list(self) -> list[str]:
        """Return a copy of the stored lines."""
        return list(self._lines)
    
    def __len__(self) -> int:
        return len(self._lines)
    
    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))
    
    def __repr__(self) -> str:
        return f"LineStore({self._lines!r})"
