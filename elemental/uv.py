"""
Per-face texture coordinates for the built shapes.

Each builder emits its faces in a fixed order (quad by quad, segment by
segment, or cube face by cube face, two triangles each), so the UV triples
below are listed in the same corner order as the matching face indices.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Tuple

from .config import UVMethod
from .errors import PreconditionError
from .mesh import FaceUV, Mesh

logger = logging.getLogger(__name__)

# Inset applied to atlas cell edges so texture filtering never reaches into
# the neighbouring cell.
EDGE_BLEED = 0.001

ATLAS_COLUMNS = 4
ATLAS_ROWS = 3

# Cube faces in build order: left, front, right, back, bottom, top
CUBE_FACES = ("left", "front", "right", "back", "bottom", "top")


def _span(i: int, n: int) -> Tuple[float, float]:
    return i / n, (i + 1) / n


# -------------------
# Plane (grid) layout
# -------------------

def _plane_quad(u1: float, u2: float, v1: float, v2: float) -> List[FaceUV]:
    # faces are (v1, v4, v2) and (v4, v3, v2) of the quad
    return [
        ((u1, v1), (u2, v1), (u1, v2)),
        ((u2, v1), (u2, v2), (u1, v2)),
    ]


def plane_uvs(mesh: Mesh, method: UVMethod) -> List[FaceUV]:
    grid = mesh.grid
    if grid is None:
        raise PreconditionError("plane UVs need the grid metadata of a plane mesh")
    uvs: List[FaceUV] = []
    for y in range(grid.segments_y):
        for x in range(grid.segments_x):
            if method == UVMethod.SPANNING:
                u1, u2 = _span(x, grid.segments_x)
                v1, v2 = _span(y, grid.segments_y)
            else:
                u1, u2, v1, v2 = 0.0, 1.0, 0.0, 1.0
            uvs.extend(_plane_quad(u1, u2, v1, v2))
    return uvs


# -----------------------------
# Strip layout (ribbon, tire)
# -----------------------------

def strip_uvs(mesh: Mesh, method: UVMethod) -> List[FaceUV]:
    """UVs for a quad strip whose even vertices are the v=1 edge."""
    count = len(mesh.faces) // 2
    uvs: List[FaceUV] = []
    for s in range(count):
        if method == UVMethod.SPANNING:
            s1, s2 = _span(s, count)
        else:
            s1, s2 = 0.0, 1.0
        uvs.append(((s1, 1.0), (s1, 0.0), (s2, 1.0)))
        uvs.append(((s2, 1.0), (s1, 0.0), (s2, 0.0)))
    return uvs


# -----------
# Cube layout
# -----------

def _cube_face(u1: float, u2: float, v1: float, v2: float) -> List[FaceUV]:
    return [
        ((u1, v2), (u1, v1), (u2, v2)),
        ((u1, v1), (u2, v1), (u2, v2)),
    ]


def atlas_cell(face: int, cap_column: int = 1) -> Tuple[int, int]:
    """(column, row) of a cube face in the 4x3 atlas, row 0 at v=0."""
    if face < 4:
        return face, 1
    return cap_column, 0 if face == 4 else 2


def cube_uvs(mesh: Mesh, method: UVMethod) -> List[FaceUV]:
    uvs: List[FaceUV] = []
    for f in range(len(CUBE_FACES)):
        if method in (UVMethod.ATLAS_CROSS, UVMethod.ATLAS_CROSS_ALT):
            col, row = atlas_cell(f, 2 if method == UVMethod.ATLAS_CROSS_ALT else 1)
            u1, u2 = _span(col, ATLAS_COLUMNS)
            v1, v2 = _span(row, ATLAS_ROWS)
            u1, u2 = u1 + EDGE_BLEED, u2 - EDGE_BLEED
            v1, v2 = v1 + EDGE_BLEED, v2 - EDGE_BLEED
        elif method == UVMethod.SPANNING:
            u1, u2 = _span(f, len(CUBE_FACES))
            v1, v2 = 0.0, 1.0
        else:
            u1, u2, v1, v2 = 0.0, 1.0, 0.0, 1.0
        uvs.extend(_cube_face(u1, u2, v1, v2))
    return uvs


_MAPPERS: Dict[str, Callable[[Mesh, UVMethod], List[FaceUV]]] = {
    "plane": plane_uvs,
    "ribbon": strip_uvs,
    "tire": strip_uvs,
    "cube": cube_uvs,
}


def set_uvs(mesh: Mesh, method: UVMethod = UVMethod.TILED) -> Mesh:
    """Replace the face UVs of ``mesh`` using ``method`` and flag them dirty."""
    method = UVMethod(method)
    mapper = _MAPPERS.get(mesh.kind)
    if mapper is None:
        raise PreconditionError(f"no UV layout for mesh kind {mesh.kind!r}")
    if mesh.kind != "cube" and method in (UVMethod.ATLAS_CROSS, UVMethod.ATLAS_CROSS_ALT):
        raise PreconditionError(f"{method.name} only applies to cube meshes, not {mesh.kind!r}")
    mesh.face_uvs = mapper(mesh, method)
    mesh.uvs_need_update = True
    logger.debug("%s: %d face UVs (%s)", mesh.name, len(mesh.face_uvs), method.name)
    return mesh
