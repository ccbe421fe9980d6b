"""Raster access for heightmaps and noise-driven texture blending."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Tuple, Union

import numpy as np
from PIL import Image

from .errors import PreconditionError

if TYPE_CHECKING:
    from .noise import NoiseField

logger = logging.getLogger(__name__)

Pixel = Tuple[int, int, int, int]


class ImageSource(Protocol):
    """Anything with a size and RGBA pixel lookup."""

    width: int
    height: int

    def get_pixel(self, x: int, y: int) -> Pixel: ...


@dataclass
class PixelBuffer:
    """Decoded RGBA pixels as a ``(height, width, 4)`` uint8 array."""

    data: np.ndarray

    def __post_init__(self) -> None:
        data = np.asarray(self.data)
        if data.ndim != 3 or data.shape[2] != 4:
            raise PreconditionError(f"pixel data must have shape (height, width, 4), got {data.shape}")
        self.data = data.astype(np.uint8, copy=False)

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        return cls(np.array(image.convert("RGBA")))

    @classmethod
    def open(cls, path: Union[str, Path]) -> "PixelBuffer":
        with Image.open(path) as img:
            buf = cls.from_image(img)
        logger.debug("loaded %s (%dx%d)", path, buf.width, buf.height)
        return buf

    @classmethod
    def filled(cls, width: int, height: int, rgba: Pixel) -> "PixelBuffer":
        return cls(np.full((height, width, 4), rgba, dtype=np.uint8))

    def get_pixel(self, x: int, y: int) -> Pixel:
        r, g, b, a = self.data[y, x]
        return int(r), int(g), int(b), int(a)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.data)


def blend_textures(first: PixelBuffer, second: PixelBuffer, noise: "NoiseField") -> PixelBuffer:
    """Mix two textures pixel by pixel, using the noise value as the weight of ``second``."""
    if first.data.shape != second.data.shape:
        raise PreconditionError(
            f"textures differ in size: {first.width}x{first.height} vs {second.width}x{second.height}"
        )
    if (noise.width, noise.height) != (first.width, first.height):
        raise PreconditionError(
            f"noise is {noise.width}x{noise.height}, textures are {first.width}x{first.height}"
        )
    w = noise.values[..., np.newaxis]
    mixed = (1.0 - w) * first.data + w * second.data
    return PixelBuffer(np.clip(np.rint(mixed), 0, 255).astype(np.uint8))
