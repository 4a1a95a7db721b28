"""Image conversion to raw RGBA pixel data."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from PIL import Image, ImageSequence

from .container import PathType


class Resize(Enum):
    """Target sizes; resizing stretches the image to fit exactly."""

    NONE = None
    FULL = (960, 544)
    LOGO = (960, 128)

    @property
    def size(self) -> Optional[tuple[int, int]]:
        return self.value


def _encode(image: Image.Image, resize: Resize) -> bytes:
    rgba = image.convert("RGBA")
    if resize.size is not None and rgba.size != resize.size:
        rgba = rgba.resize(resize.size)
    return rgba.tobytes()


def to_rgba(path: Union[PathType, Image.Image], resize: Resize = Resize.NONE) -> bytes:
    """Return the RGBA pixel bytes of an image file or an open image."""
    if isinstance(path, Image.Image):
        return _encode(path, resize)
    with Image.open(path) as image:
        return _encode(image, resize)


def extract_gif_frames(path: PathType) -> list[Image.Image]:
    """Return every frame of an animated image, fully composited, as RGBA."""
    with Image.open(path) as animation:
        return [frame.convert("RGBA") for frame in ImageSequence.Iterator(animation)]