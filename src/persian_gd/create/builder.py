"""Fluent builder that turns lines of text into a PNG image."""

import logging
from collections.abc import Iterable
from typing import Any, Callable, Mapping

from persian_gd.core.color import decode_color
from persian_gd.core.lines import LineStore
from persian_gd.decorate.base import StringDecorator
from persian_gd.decorate.persian import PersianStringDecorator
from persian_gd.errors import PersianGDError
from persian_gd.render.canvas import RasterCanvas
from persian_gd.render.layout import LineComposer, canvas_height, canvas_size
from persian_gd.render.output import BuildOutput, OutputMode, encode_output


logger = logging.getLogger(__name__)


# Option name -> builder attribute. This is the complete set accepted by
# set_options(); anything else is ignored.
OPTION_FIELDS: dict[str, str] = {
    "width": "width",
    "fileName": "file_name",
    "outputImage": "output_image",
    "backgroundColor": "background_color",
    "fontColor": "font_color",
    "fontSize": "font_size",
    "angle": "angle",
    "horizontalPosition": "horizontal_position",
    "verticalPosition": "vertical_position",
    "lineHeight": "line_height",
    "font": "font",
    "lines": "lines",
    "decorator": "decorator",
    "useLocalNumber": "use_local_number",
}

# Recognized for compatibility but never stored: the canvas and its color
# allocations only exist inside a single build.
PER_BUILD_OPTIONS = frozenset({
    "backgroundColorAllocate",
    "fontColorAllocate",
    "imageResource",
    "background_color_allocate",
    "font_color_allocate",
    "image_resource",
})

_FIELD_NAMES = frozenset(OPTION_FIELDS.values())


CanvasFactory = Callable[[int, int], RasterCanvas]


class ImageBuilder:
    """
    Collects style options and lines, then renders them to PNG.
    
    Setters store values as given and return the builder, so calls
    chain. Nothing is checked until ``build()``, which recomputes the
    canvas, colors and layout from the current state every time.
    
    Example:
        >>> png = (ImageBuilder()
        ...     .set_width(300)
        ...     .set_output_image(True)
        ...     .add_line("سلام دنیا")
        ...     .add_line("Page 12")
        ...     .build())
    """
    
    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        canvas_factory: CanvasFactory = RasterCanvas,
    ):
        self.width = 500
        self.file_name: str | None = None
        self.output_image = False
        self.background_color = "#FFFFFF"
        self.font_color = "#000000"
        self.font_size = 12
        self.angle = 0
        self.horizontal_position = 10
        self.vertical_position = 10
        self.line_height = 25
        self.font: str | None = None
        self.use_local_number = True
        self.decorator: StringDecorator | None = None
        self._lines = LineStore()
        self._canvas_factory = canvas_factory
        
        if options:
            self.set_options(options)
    
    # -- Fluent setters ---------------------------------------------------
    
    def set_width(self, width: int) -> "ImageBuilder":
        """Set the canvas width in pixels."""
        self.width = width
        return self
    
    def set_file_name(self, file_name: str) -> "ImageBuilder":
        """Set the path written to when not outputting bytes."""
        self.file_name = file_name
        return self
    
    def set_output_image(self, output_image: bool) -> "ImageBuilder":
        """True to return PNG bytes from build(), False to write a file."""
        self.output_image = output_image
        return self
    
    def set_background_color(self, background_color: str) -> "ImageBuilder":
        """Set the background as a ``#RGB`` or ``#RRGGBB`` string."""
        self.background_color = background_color
        return self
    
    def set_font_color(self, font_color: str) -> "ImageBuilder":
        """Set the text color as a ``#RGB`` or ``#RRGGBB`` string."""
        self.font_color = font_color
        return self
    
    def set_font(self, font: str) -> "ImageBuilder":
        """Set the path of the TrueType/OpenType font to draw with."""
        self.font = font
        return self
    
    def set_font_size(self, font_size: int) -> "ImageBuilder":
        self.font_size = font_size
        return self
    
    def set_angle(self, angle: int) -> "ImageBuilder":
        """Set the text rotation in degrees, counter-clockwise."""
        self.angle = angle
        return self
    
    def set_horizontal_position(self, horizontal_position: int) -> "ImageBuilder":
        """Set the x of every line's first character."""
        self.horizontal_position = horizontal_position
        return self
    
    def set_vertical_position(self, vertical_position: int) -> "ImageBuilder":
        """Set the baseline y of the first line."""
        self.vertical_position = vertical_position
        return self
    
    def set_line_height(self, line_height: int) -> "ImageBuilder":
        self.line_height = line_height
        return self
    
    def set_use_local_number(self, use_local_number: bool) -> "ImageBuilder":
        """Whether the decorator should switch digits to their Persian forms."""
        self.use_local_number = use_local_number
        return self
    
    def set_decorator(self, decorator: StringDecorator) -> "ImageBuilder":
        """Replace the decorator applied to each line before drawing."""
        self.decorator = decorator
        return self
    
    def set_options(self, options: Mapping[str, Any]) -> "ImageBuilder":
        """
        Apply several options at once.
        
        Keys are the camelCase option names (``fontSize``, ``lineHeight``,
        ...) or the matching attribute names (``font_size``). Unknown keys
        are skipped. ``lines`` replaces the current lines, keeping only
        strings.
        """
        for name, value in options.items():
            if name in PER_BUILD_OPTIONS:
                logger.debug("option %r only exists during a build, skipping", name)
                continue
            
            field = OPTION_FIELDS.get(name)
            if field is None and name in _FIELD_NAMES:
                field = name
            if field is None:
                logger.debug("ignoring unknown option %r", name)
                continue
            
            if field == "lines":
                if isinstance(value, str):
                    value = [value]
                elif not isinstance(value, Iterable):
                    logger.debug("option 'lines' is not a sequence of text, clearing lines")
                    value = []
                self._lines.replace(value)
            else:
                setattr(self, field, value)
        
        return self
    
    # -- Lines ------------------------------------------------------------
    
    def add_line(self, line: str) -> "ImageBuilder":
        """Append one line of text; other values are stored as ``str(line)``."""
        self._lines.append(line)
        return self
    
    def add_lines(self, lines: Iterable[object]) -> "ImageBuilder":
        """Append several lines; entries that are not strings are dropped."""
        self._lines.extend(lines)
        return self
    
    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)
    
    @property
    def height(self) -> int:
        """Height the canvas would have if built now."""
        return canvas_height(len(self._lines), self.line_height)
    
    def options(self) -> dict[str, Any]:
        """Current option values keyed by camelCase option name."""
        return {
            name: self._lines.as_list() if field == "lines" else getattr(self, field)
            for name, field in OPTION_FIELDS.items()
        }
    
    # -- Build ------------------------------------------------------------
    
    def render(self) -> BuildOutput:
        """
        Draw the lines and deliver the PNG.
        
        Returns ``ImageBytes`` when ``output_image`` is true and
        ``ImageFile`` otherwise.
        
        Raises:
            InvalidColorFormat: background or font color is malformed.
            PersianGDError: file mode without a file name, or a font
                that cannot be opened.
        """
        decorator = self.decorator if self.decorator is not None else PersianStringDecorator()
        mode = OutputMode.from_flag(self.output_image)
        if mode is OutputMode.FILE and not self.file_name:
            raise PersianGDError("A file name is required when the image is not output as bytes")
        
        lines = self._lines.as_list()
        width, height = canvas_size(self.width, len(lines), self.line_height)
        logger.debug("building %dx%d image with %d lines (%s)", width, height, len(lines), mode.value)
        
        with self._canvas_factory(width, height) as canvas:
            canvas.allocate(decode_color(self.background_color))
            font_color = canvas.allocate(decode_color(self.font_color))
            
            composer = LineComposer(
                decorator=decorator,
                font_size=self.font_size,
                angle=self.angle,
                x=self.horizontal_position,
                y=self.vertical_position,
                line_height=self.line_height,
                font=self.font,
                use_local_number=self.use_local_number,
            )
            composer.compose(canvas, lines, font_color)
            
            return encode_output(canvas, mode, self.file_name)
    
    def build(self) -> bytes | str:
        """Render and return PNG bytes (buffer mode) or the file name (file mode)."""
        return self.render().value
