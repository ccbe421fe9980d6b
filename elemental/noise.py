"""
Multi-octave value noise.

The generator follows the classic "smooth noise" recipe: a grid of binary
white noise is resampled at a coarser period per octave with bilinear
interpolation (wrapping around the edges, so the result tiles), and the
octaves are summed with amplitudes ``persistence**o`` and normalized back to
[0, 1]. It is value noise, not gradient (Perlin) noise, despite the name of
``perlin_noise``.

Arrays are indexed ``[y, x]`` with shape ``(height, width)``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
from PIL import Image

from .errors import InvalidShapeError
from .image import PixelBuffer

logger = logging.getLogger(__name__)

PERSISTENCE = 0.5

RandomSource = Union[np.random.Generator, int, None]


def _rng(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def _require_size(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise InvalidShapeError(f"noise size must be at least 1x1 (got {width}x{height})")


def _require_octaves(octave_count: int) -> None:
    if octave_count < 1:
        raise InvalidShapeError(f"octave_count must be >= 1 (got {octave_count})")


def _lerp(a, b, w):
    return (1.0 - w) * a + w * b


@dataclass(frozen=True, eq=False)
class NoiseField:
    """Generated noise values in [0, 1]; read-only once created."""

    values: np.ndarray
    octaves: int = 1

    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=np.float64)
        values.setflags(write=False)
        object.__setattr__(self, "values", values)

    @property
    def width(self) -> int:
        return int(self.values.shape[1])

    @property
    def height(self) -> int:
        return int(self.values.shape[0])

    def __getitem__(self, xy: Tuple[int, int]) -> float:
        x, y = xy
        return float(self.values[y, x])

    def to_pixels(self) -> PixelBuffer:
        """Grayscale RGBA pixels (opaque), usable as a heightmap source."""
        gray = np.rint(self.values * 255).astype(np.uint8)
        alpha = np.full_like(gray, 255)
        return PixelBuffer(np.stack([gray, gray, gray, alpha], axis=-1))

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.rint(self.values * 255).astype(np.uint8))


# -----------
# Generators
# -----------

def white_noise(width: int, height: int, rng: RandomSource = None) -> np.ndarray:
    """Independent samples drawn from {0, 1}."""
    _require_size(width, height)
    return _rng(rng).integers(0, 1, size=(height, width), endpoint=True).astype(np.float64)


def smooth_noise(base: np.ndarray, octave: int) -> np.ndarray:
    """Resample ``base`` at a period of ``2**octave`` cells with bilinear blending.

    Every cell blends the four corners of the period-aligned cell enclosing
    it; corners past the right or bottom edge wrap around to the other side.
    """
    _require_octaves(octave)
    h, w = base.shape
    period = 1 << octave
    frequency = 1.0 / period

    xs = np.arange(w)
    x0 = (xs // period) * period
    x1 = (x0 + period) % w
    hblend = (xs - x0) * frequency

    ys = np.arange(h)
    y0 = (ys // period) * period
    y1 = (y0 + period) % h
    vblend = ((ys - y0) * frequency)[:, np.newaxis]

    top = _lerp(base[np.ix_(y0, x0)], base[np.ix_(y0, x1)], hblend)
    bottom = _lerp(base[np.ix_(y1, x0)], base[np.ix_(y1, x1)], hblend)
    return _lerp(top, bottom, vblend)


def blend_octaves(base: np.ndarray, octave_count: int, persistence: float = PERSISTENCE) -> np.ndarray:
    """Weighted sum of octaves ``1..octave_count`` normalized by the total amplitude."""
    _require_octaves(octave_count)
    result = np.zeros(base.shape, dtype=np.float64)
    amplitude = 1.0
    total_amplitude = 0.0
    for octave in range(1, octave_count + 1):
        amplitude *= persistence
        total_amplitude += amplitude
        result += smooth_noise(base, octave) * amplitude
    result /= total_amplitude
    return np.clip(result, 0.0, 1.0)


def perlin_noise(width: int, height: int, octave_count: int, rng: RandomSource = None) -> NoiseField:
    """Generate a ``width`` x ``height`` noise field from fresh white noise."""
    _require_size(width, height)
    _require_octaves(octave_count)
    base = white_noise(width, height, rng)
    field = NoiseField(blend_octaves(base, octave_count), octaves=octave_count)
    logger.debug("generated %dx%d noise with %d octaves", width, height, octave_count)
    return field
