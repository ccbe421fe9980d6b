"""Per-call builder configuration."""
from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .errors import InvalidShapeError


class UVMethod(enum.IntEnum):
    TILED = 0            # every quad covers the whole texture (terrain)
    SPANNING = 1         # one texture stretched across the whole shape
    ATLAS_CROSS = 2      # cube only: 4x3 cross layout
    ATLAS_CROSS_ALT = 3  # cube only: cross layout with the caps one column right


@dataclass(frozen=True)
class ShapeConfig:
    """Options shared by the builders.

    Every field has a real default; ``0`` is always a value, never "unset".
    A pivot component of -1 or 1 moves the local origin half a dimension
    along that axis, 0 keeps the shape centered.
    """

    segments_x: int = 1
    segments_y: int = 1
    face_normals: bool = True
    vertex_normals: bool = False
    uv_method: UVMethod = UVMethod.TILED
    pivot: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        for name in ("segments_x", "segments_y"):
            n = getattr(self, name)
            if isinstance(n, bool) or not isinstance(n, int) or n < 1:
                raise InvalidShapeError(f"{name} must be an integer >= 1 (got {n!r})")
        if len(self.pivot) != 3:
            raise InvalidShapeError(f"pivot needs 3 components (got {self.pivot!r})")
        for axis, p in zip("xyz", self.pivot):
            if not -1.0 <= p <= 1.0:
                raise InvalidShapeError(f"pivot {axis} must lie in [-1, 1] (got {p})")
        try:
            method = UVMethod(self.uv_method)
        except ValueError:
            raise InvalidShapeError(f"unknown uv_method {self.uv_method!r}") from None
        object.__setattr__(self, "uv_method", method)
        object.__setattr__(self, "pivot", tuple(float(p) for p in self.pivot))


def resolve_config(config: Optional[ShapeConfig], overrides: Dict[str, Any]) -> ShapeConfig:
    """Merge keyword overrides into ``config`` (or the defaults)."""
    if config is None:
        return ShapeConfig(**overrides)
    if overrides:
        return dataclasses.replace(config, **overrides)
    return config
