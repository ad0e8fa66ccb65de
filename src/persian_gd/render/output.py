"""Final PNG delivery: in-memory bytes or a file on disk."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Union

from persian_gd.errors import PersianGDError

if TYPE_CHECKING:
    from persian_gd.render.canvas import RasterCanvas


logger = logging.getLogger(__name__)


class OutputMode(Enum):
    """Where a finished image goes."""
    BUFFER = "buffer"   # Return encoded bytes, write nothing
    FILE = "file"       # Write to the configured file name
    
    @classmethod
    def from_flag(cls, output_image: bool) -> "OutputMode":
        """Map the ``outputImage`` option onto a mode."""
        return cls.BUFFER if output_image else cls.FILE


@dataclass(frozen=True)
class ImageBytes:
    """A PNG encoded in memory."""
    data: bytes
    mode: OutputMode = field(default=OutputMode.BUFFER, init=False)
    
    @property
    def value(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class ImageFile:
    """A PNG written to ``path``."""
    path: str
    mode: OutputMode = field(default=OutputMode.FILE, init=False)
    
    @property
    def value(self) -> str:
        return self.path


BuildOutput = Union[ImageBytes, ImageFile]


def encode_output(
    canvas: "RasterCanvas",
    mode: OutputMode,
    file_name: str | Path | None = None,
) -> BuildOutput:
    """
    Encode ``canvas`` according to ``mode``.
    
    Buffer mode never touches the filesystem. File mode requires
    ``file_name`` and returns it unchanged as confirmation.
    """
    if mode is OutputMode.BUFFER:
        data = canvas.encode()
        logger.debug("encoded %d bytes", len(data))
        return ImageBytes(data)
    
    if not file_name:
        raise PersianGDError("A file name is required when the image is not output as bytes")
    canvas.save(file_name)
    logger.debug("wrote %s", file_name)
    return ImageFile(str(file_name))
