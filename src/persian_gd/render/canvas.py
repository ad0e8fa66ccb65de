"""Pillow-backed raster canvas used by the build pipeline."""

import logging
import math
from io import BytesIO
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from persian_gd.core.color import ColorAllocation
from persian_gd.errors import PersianGDError


logger = logging.getLogger(__name__)

IMAGE_FORMAT = "PNG"


class RasterCanvas:
    """
    A blank RGB surface that text lines are drawn onto.
    
    Colors are allocated before use, as on a palette image: the first
    color allocated on a canvas becomes its background. Text is placed
    by the left end of its baseline and rotated counter-clockwise around
    that point.
    
    The canvas owns a Pillow image until ``close()`` is called; use it
    as a context manager so the image is released on every path:
    
        >>> with RasterCanvas(200, 50) as canvas:
        ...     white = canvas.allocate((255, 255, 255))
        ...     black = canvas.allocate((0, 0, 0))
        ...     canvas.draw_text(12, 0, 10, 30, black, None, "hello")
        ...     png = canvas.encode()
    """
    
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._image: Image.Image | None = Image.new("RGB", (width, height))
        self._palette: list[tuple[int, int, int]] = []
        self._fonts: dict[tuple[str | None, int], ImageFont.FreeTypeFont | ImageFont.ImageFont] = {}
        logger.debug("allocated %dx%d canvas", width, height)
    
    @property
    def closed(self) -> bool:
        return self._image is None
    
    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)
    
    @property
    def palette(self) -> list[tuple[int, int, int]]:
        """Colors allocated so far, in allocation order."""
        return list(self._palette)
    
    def allocate(self, rgb: tuple[int, int, int]) -> ColorAllocation:
        """Allocate a color on this canvas; the first one fills the background."""
        image = self._require_image()
        red, green, blue = rgb
        handle = len(self._palette)
        self._palette.append((red, green, blue))
        if handle == 0:
            image.paste((red, green, blue), (0, 0, self.width, self.height))
        return ColorAllocation(red, green, blue, handle)
    
    def draw_text(
        self,
        font_size: int,
        angle: int,
        x: int,
        y: int,
        color: ColorAllocation,
        font_path: str | None,
        text: str,
    ) -> None:
        """Draw ``text`` with its baseline starting at (x, y)."""
        image = self._require_image()
        if color.handle >= len(self._palette):
            raise PersianGDError(f"Color handle {color.handle} was not allocated on this canvas")
        
        font = self._font(font_path, font_size)
        ascent = _ascent(font)
        
        if not angle:
            ImageDraw.Draw(image).text((x, y - ascent), text, font=font, fill=color.rgb)
            return
        
        # Render onto a square mask centred on the baseline origin, rotate it
        # about that centre, then stamp the color through the mask.
        left, top, right, bottom = font.getbbox(text)
        corners = [(cx, cy - ascent) for cx in (left, right) for cy in (top, bottom)]
        radius = math.ceil(max(math.hypot(cx, cy) for cx, cy in corners)) + 1
        
        mask = Image.new("L", (radius * 2, radius * 2), 0)
        ImageDraw.Draw(mask).text((radius, radius - ascent), text, font=font, fill=255)
        rotated = mask.rotate(angle, resample=Image.Resampling.BICUBIC)
        image.paste(color.rgb, (x - radius, y - radius), rotated)
        mask.close()
        rotated.close()
    
    def encode(self) -> bytes:
        """Encode the canvas as PNG and return the bytes."""
        image = self._require_image()
        buffer = BytesIO()
        image.save(buffer, format=IMAGE_FORMAT)
        return buffer.getvalue()
    
    def save(self, path: str | Path) -> str:
        """Encode the canvas as PNG into ``path`` and return the path."""
        image = self._require_image()
        image.save(path, format=IMAGE_FORMAT)
        return str(path)
    
    def close(self) -> None:
        """Release the underlying image. Safe to call more than once."""
        if self._image is not None:
            self._image.close()
            self._image = None
            self._fonts.clear()
            logger.debug("released %dx%d canvas", self.width, self.height)
    
    def __enter__(self) -> "RasterCanvas":
        return self
    
    def __exit__(self, *exc_info: object) -> None:
        self.close()
    
    def _require_image(self) -> Image.Image:
        if self._image is None:
            raise PersianGDError("Canvas has already been released")
        return self._image
    
    def _font(self, font_path: str | None, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        key = (font_path, size)
        if key not in self._fonts:
            if font_path is None:
                self._fonts[key] = ImageFont.load_default(size=size)
            else:
                try:
                    self._fonts[key] = ImageFont.truetype(font_path, size)
                except OSError as exc:
                    raise PersianGDError(f"Cannot open font {font_path!r}: {exc}") from exc
        return self._fonts[key]


def _ascent(font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> int:
    """Distance from the top of a line to its baseline."""
    if isinstance(font, ImageFont.FreeTypeFont):
        return font.getmetrics()[0]
    # Bitmap fonts have no metrics; treat the bottom of the box as baseline.
    return int(font.getbbox("Ag")[3])
