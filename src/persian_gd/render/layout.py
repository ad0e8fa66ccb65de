"""Canvas sizing and per-line text placement."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

from persian_gd.core.color import ColorAllocation
from persian_gd.decorate.base import StringDecorator

if TYPE_CHECKING:
    from persian_gd.render.canvas import RasterCanvas


logger = logging.getLogger(__name__)


def canvas_height(line_count: int, line_height: int) -> int:
    """
    Height needed for ``line_count`` lines.
    
    One extra line of room is added so the last baseline, which sits
    ``line_count - 1`` steps below the first, still has space for its
    descenders.
    """
    return (line_count + 1) * line_height


def canvas_size(width: int, line_count: int, line_height: int) -> tuple[int, int]:
    """Return the (width, height) of the canvas for a build."""
    return (width, canvas_height(line_count, line_height))


@dataclass
class LineComposer:
    """
    Draws lines one under another, stepping the baseline by ``line_height``.
    
    Only the vertical position changes from line to line; font, size,
    angle and horizontal start are the same for every line.
    """
    decorator: StringDecorator
    font_size: int
    angle: int
    x: int
    y: int
    line_height: int
    font: str | None = None
    use_local_number: bool = True
    
    def positions(self, count: int) -> Iterator[int]:
        """Yield the baseline y of each of ``count`` lines."""
        cursor = self.y
        for _ in range(count):
            yield cursor
            cursor += self.line_height
    
    def compose(
        self,
        canvas: "RasterCanvas",
        lines: Iterable[str],
        color: ColorAllocation,
    ) -> int:
        """Decorate and draw each line in order; return how many were drawn."""
        lines = list(lines)
        drawn = 0
        for line, baseline in zip(lines, self.positions(len(lines))):
            text = self.decorator.decorate(line, self.use_local_number)
            canvas.draw_text(
                self.font_size,
                self.angle,
                self.x,
                baseline,
                color,
                self.font,
                text,
            )
            drawn += 1
        logger.debug("drew %d lines", drawn)
        return drawn
