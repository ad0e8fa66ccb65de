"""Rasterization: canvas, layout and PNG output."""

from persian_gd.render.canvas import RasterCanvas
from persian_gd.render.layout import LineComposer, canvas_height, canvas_size
from persian_gd.render.output import (
    BuildOutput,
    ImageBytes,
    ImageFile,
    OutputMode,
    encode_output,
)

__all__ = [
    "BuildOutput",
    "ImageBytes",
    "ImageFile",
    "LineComposer",
    "OutputMode",
    "RasterCanvas",
    "canvas_height",
    "canvas_size",
    "encode_output",
]
