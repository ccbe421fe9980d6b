"""
Shared-vertex primitive builders: plane, cube, ribbon (polyline) and tire.

Neighbouring faces share vertices, so a plane of sx*sy quads has only
(sx+1)*(sy+1) vertices and a cube only its 8 corners. All faces wind
counter-clockwise seen from the outside.

Every builder takes an optional ``ShapeConfig`` plus keyword overrides:

    mesh = plane(4.0, 2.0, segments_x=8, segments_y=4, uv_method=UVMethod.SPANNING)
    box = cube(1.0, pivot=(0, -1, 0))     # origin on the bottom face
"""
from __future__ import annotations

import logging
import math
from typing import Any, List, Optional, Sequence

from .config import ShapeConfig, resolve_config
from .errors import InsufficientDataError, InvalidShapeError
from .mesh import GridMeta, Mesh, Tri, Vec3
from .uv import set_uvs

logger = logging.getLogger(__name__)


def _require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise InvalidShapeError(f"{name} must be > 0 (got {value})")


def _finish(mesh: Mesh, config: ShapeConfig) -> Mesh:
    mesh.compute_normals(face=config.face_normals, vertex=config.vertex_normals)
    set_uvs(mesh, config.uv_method)
    logger.debug("built %s: %d vertices, %d faces", mesh.name, len(mesh.vertices), len(mesh.faces))
    return mesh


# -----
# Plane
# -----

def plane(width: float = 1.0, height: float = 1.0, config: Optional[ShapeConfig] = None,
          name: str = "plane", **kwargs: Any) -> Mesh:
    """Grid on the XY plane, centered on the origin, facing +Z.

    Vertex ``(x, y)`` of the grid has index ``y*(segments_x+1) + x``.
    """
    config = resolve_config(config, kwargs)
    _require_positive("width", width)
    _require_positive("height", height)
    segx, segy = config.segments_x, config.segments_y

    px, py, _ = config.pivot
    sx = -width / 2 + width / 2 * px
    sy = -height / 2 + height / 2 * py
    intx = width / segx
    inty = height / segy

    verts: List[Vec3] = []
    faces: List[Tri] = []
    for y in range(segy + 1):
        for x in range(segx + 1):
            verts.append((sx + intx * x, sy + inty * y, 0.0))
            if x < segx and y < segy:
                v1 = y * (segx + 1) + x
                v2 = (y + 1) * (segx + 1) + x
                v3 = v2 + 1
                v4 = v1 + 1
                faces.append((v1, v4, v2))
                faces.append((v4, v3, v2))

    mesh = Mesh(verts, faces, name=name, kind="plane",
                grid=GridMeta(segx, segy, float(width), float(height)))
    return _finish(mesh, config)


# ----
# Cube
# ----

# left, front, right, back, bottom, top
CUBE_TRIANGLES: List[Tri] = [
    (4, 5, 0), (5, 1, 0),
    (0, 1, 3), (1, 2, 3),
    (3, 2, 7), (2, 6, 7),
    (7, 6, 4), (6, 5, 4),
    (1, 5, 2), (5, 6, 2),
    (4, 0, 7), (0, 3, 7),
]


def cube(size: float = 1.0, config: Optional[ShapeConfig] = None, name: str = "cube",
         **kwargs: Any) -> Mesh:
    config = resolve_config(config, kwargs)
    _require_positive("size", size)

    half = size / 2
    x, y, z = (half * p for p in config.pivot)
    verts: List[Vec3] = [
        # front 4
        (-half + x, half + y, half + z),
        (-half + x, -half + y, half + z),
        (half + x, -half + y, half + z),
        (half + x, half + y, half + z),
        # back 4
        (-half + x, half + y, -half + z),
        (-half + x, -half + y, -half + z),
        (half + x, -half + y, -half + z),
        (half + x, half + y, -half + z),
    ]
    mesh = Mesh(verts, list(CUBE_TRIANGLES), name=name, kind="cube")
    return _finish(mesh, config)


# ------
# Ribbon
# ------

def ribbon(points: Sequence[Vec3], height: float = 1.0, config: Optional[ShapeConfig] = None,
           name: str = "ribbon", **kwargs: Any) -> Mesh:
    """Vertical strip of quads following a polyline.

    Each path point yields a top vertex (even index) and a bottom vertex (odd
    index). The y pivot moves the strip: 0 centers it on the path, -1 hangs it
    below, 1 stands it on top.
    """
    config = resolve_config(config, kwargs)
    if len(points) < 2:
        raise InsufficientDataError(f"a ribbon needs at least 2 points (got {len(points)})")
    _require_positive("height", height)

    offset = (height / 2) * (config.pivot[1] - 1)
    verts: List[Vec3] = []
    faces: List[Tri] = []
    last = len(points) - 1
    for s, (px, py, pz) in enumerate(points):
        bottom = py + offset
        verts.append((px, bottom + height, pz))
        verts.append((px, bottom, pz))
        if s < last:
            faces.append((s * 2, s * 2 + 1, s * 2 + 2))
            faces.append((s * 2 + 2, s * 2 + 1, s * 2 + 3))

    mesh = Mesh(verts, faces, name=name, kind="ribbon")
    return _finish(mesh, config)


# ----
# Tire
# ----

def tire(radius: float = 1.0, width: float = 0.5, segments: int = 16, chamfering: float = 0.8,
         config: Optional[ShapeConfig] = None, name: str = "tire", **kwargs: Any) -> Mesh:
    """Open cylinder band around the Z axis.

    ``chamfering`` scales the half width of the band. The last segment closes
    the ring by reusing the first vertex pair:

        (0) (2) (4)        triangles of segment 0: (0, 1, 2) (2, 1, 3)
        (1) (3) (5)        closing segment:        (4, 5, 0) (0, 5, 1)
    """
    config = resolve_config(config, kwargs)
    _require_positive("radius", radius)
    _require_positive("width", width)
    if isinstance(segments, bool) or not isinstance(segments, int) or segments < 3:
        raise InvalidShapeError(f"segments must be an integer >= 3 (got {segments!r})")
    if not 0 < chamfering <= 1:
        raise InvalidShapeError(f"chamfering must lie in (0, 1] (got {chamfering})")

    hw = (width / 2) * chamfering
    step = (math.pi * 2) / segments
    verts: List[Vec3] = []
    faces: List[Tri] = []
    for v in range(segments):
        ang = step * v
        x = math.cos(ang) * radius
        y = math.sin(ang) * radius
        p = len(verts)
        verts.append((x, y, hw))
        verts.append((x, y, -hw))
        nxt = p + 2 if v < segments - 1 else 0
        faces.append((p, p + 1, nxt))
        faces.append((nxt, p + 1, nxt + 1))

    mesh = Mesh(verts, faces, name=name, kind="tire")
    return _finish(mesh, config)
