"""Shared fixtures: a canvas double that records what the pipeline asks of it."""

from dataclasses import dataclass, field
from typing import Any

import pytest

from persian_gd.core.color import ColorAllocation
from persian_gd.create.builder import ImageBuilder


PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@dataclass
class RecordingCanvas:
    """Stands in for RasterCanvas and logs every call into ``events``."""
    width: int
    height: int
    events: list[tuple[Any, ...]] = field(default_factory=list)
    palette: list[tuple[int, int, int]] = field(default_factory=list)
    draws: list[tuple[Any, ...]] = field(default_factory=list)
    closed: bool = False
    
    def allocate(self, rgb: tuple[int, int, int]) -> ColorAllocation:
        self.events.append(("allocate", rgb))
        self.palette.append(rgb)
        return ColorAllocation(*rgb, handle=len(self.palette) - 1)
    
    def draw_text(self, font_size, angle, x, y, color, font_path, text) -> None:
        self.events.append(("draw", text))
        self.draws.append((font_size, angle, x, y, color, font_path, text))
    
    def encode(self) -> bytes:
        self.events.append(("encode",))
        return PNG_SIGNATURE + b"fake"
    
    def save(self, path) -> str:
        self.events.append(("save", str(path)))
        return str(path)
    
    def close(self) -> None:
        self.events.append(("close",))
        self.closed = True
    
    def __enter__(self) -> "RecordingCanvas":
        return self
    
    def __exit__(self, *exc_info) -> None:
        self.close()


class RecordingDecorator:
    """Tags each line and logs the call into a shared event list."""
    
    def __init__(self, events: list[tuple[Any, ...]]):
        self.events = events
        self.calls: list[tuple[str, bool]] = []
    
    def decorate(self, text: str, use_local_digits: bool) -> str:
        self.events.append(("decorate", text))
        self.calls.append((text, use_local_digits))
        return f"<{text}>"


@pytest.fixture
def events() -> list[tuple[Any, ...]]:
    """Event log shared by the recording canvas and decorator."""
    return []


@pytest.fixture
def canvases() -> list[RecordingCanvas]:
    """Every RecordingCanvas created by ``recording_builder``."""
    return []


@pytest.fixture
def recording_builder(events, canvases) -> ImageBuilder:
    """An ImageBuilder whose canvases are RecordingCanvas instances."""
    
    def factory(width: int, height: int) -> RecordingCanvas:
        canvas = RecordingCanvas(width, height, events=events)
        canvases.append(canvas)
        return canvas
    
    return ImageBuilder(canvas_factory=factory)


@pytest.fixture
def recording_decorator(events) -> RecordingDecorator:
    return RecordingDecorator(events)
