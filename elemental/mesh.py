"""
Mesh container shared by every builder, UV mapper and modifier.

Texture coordinates are stored per face corner (``face_uvs`` runs parallel to
``faces``), not per vertex. A vertex shared by two faces may therefore carry a
different UV in each of them, which is what lets neighbouring faces share
vertices even across a texture seam.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .errors import PreconditionError

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]
Tri = Tuple[int, int, int]
FaceUV = Tuple[Vec2, Vec2, Vec2]

# -----------------------------
# Small vector utilities
# -----------------------------


def v_add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def v_sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def v_cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def v_norm(a: Vec3) -> Vec3:
    l = math.sqrt(a[0] * a[0] + a[1] * a[1] + a[2] * a[2])
    if l == 0:
        return (0.0, 0.0, 0.0)
    return (a[0] / l, a[1] / l, a[2] / l)


def face_normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    return v_norm(v_cross(v_sub(b, a), v_sub(c, a)))


# --------------
# Mesh container
# --------------

@dataclass(frozen=True)
class GridMeta:
    """Segment counts and dimensions of a plane, needed by UVs and modifiers."""

    segments_x: int
    segments_y: int
    width: float
    height: float

    def index(self, x: int, y: int) -> int:
        return y * (self.segments_x + 1) + x


@dataclass
class Mesh:
    vertices: List[Vec3] = field(default_factory=list)
    faces: List[Tri] = field(default_factory=list)
    face_uvs: List[FaceUV] = field(default_factory=list)
    face_normals: Optional[List[Vec3]] = None  # aligned 1:1 with faces when present
    normals: Optional[List[Vec3]] = None       # aligned 1:1 with vertices when present
    name: str = "mesh"
    kind: str = "mesh"
    grid: Optional[GridMeta] = None
    verts_need_update: bool = False
    uvs_need_update: bool = False

    # ---- shading ----
    def compute_face_normals(self) -> "Mesh":
        self.face_normals = [
            face_normal(self.vertices[a], self.vertices[b], self.vertices[c])
            for (a, b, c) in self.faces
        ]
        return self

    def compute_vertex_normals(self) -> "Mesh":
        # Smooth: average adjacent face normals per vertex
        normals = [(0.0, 0.0, 0.0) for _ in self.vertices]
        for (a, b, c) in self.faces:
            n = face_normal(self.vertices[a], self.vertices[b], self.vertices[c])
            normals[a] = v_add(normals[a], n)
            normals[b] = v_add(normals[b], n)
            normals[c] = v_add(normals[c], n)
        self.normals = [v_norm(n) for n in normals]
        return self

    def compute_normals(self, face: bool = True, vertex: bool = False) -> "Mesh":
        if vertex:
            self.compute_vertex_normals()
        if face:
            self.compute_face_normals()
        return self

    # ---- analysis ----
    def bounds(self) -> Tuple[Vec3, Vec3]:
        xs = [v[0] for v in self.vertices]
        ys = [v[1] for v in self.vertices]
        zs = [v[2] for v in self.vertices]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def validate(self) -> "Mesh":
        """Check that every face index is in range and UVs match the faces."""
        count = len(self.vertices)
        for i, face in enumerate(self.faces):
            if any(not 0 <= idx < count for idx in face):
                raise PreconditionError(f"face {i} {face} references a vertex outside 0..{count - 1}")
        if len(self.face_uvs) != len(self.faces):
            raise PreconditionError(
                f"{len(self.face_uvs)} face UV triples for {len(self.faces)} faces"
            )
        return self

    def copy(self) -> "Mesh":
        return Mesh(self.vertices.copy(), self.faces.copy(), self.face_uvs.copy(),
                    None if self.face_normals is None else self.face_normals.copy(),
                    None if self.normals is None else self.normals.copy(),
                    self.name, self.kind, self.grid)
