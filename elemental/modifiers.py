"""
In-place modifiers for plane meshes.

Both modifiers only move vertices; faces and face UVs are left untouched. They
return the mesh they were given with ``verts_need_update`` set so the caller
can pass the change on to whatever caches render buffers.
"""
from __future__ import annotations

import logging
import math
from typing import Union

from .errors import PreconditionError, UnsupportedAxisError
from .image import ImageSource
from .mesh import GridMeta, Mesh
from .noise import NoiseField

logger = logging.getLogger(__name__)


def _require_grid(mesh: Mesh, what: str) -> GridMeta:
    if mesh.grid is None:
        raise PreconditionError(f"{what} needs a plane mesh, {mesh.name!r} has no grid metadata")
    return mesh.grid


# -----
# Bend
# -----

def bend(mesh: Mesh, axis: str, amount: float, reverse: bool = False) -> Mesh:
    """Bend a plane into a circular arc of ``amount`` degrees.

    Rows (``axis="y"``) or columns (``axis="x"``) are laid out one after the
    other starting from the unbent first one: row ``i`` sits one segment
    length away from row ``i-1`` at an angle of ``i * amount/segments``
    degrees from the axis, rising along +Z (-Z when ``reverse``).
    """
    if axis not in ("x", "y"):
        raise UnsupportedAxisError(f"bend axis must be 'x' or 'y' (got {axis!r})")
    grid = _require_grid(mesh, "bend")

    if axis == "y":
        dsegs, rsegs, dsize = grid.segments_y, grid.segments_x, grid.height
    else:
        dsegs, rsegs, dsize = grid.segments_x, grid.segments_y, grid.width
    segdist = dsize / dsegs
    step = math.radians(amount / dsegs)
    lift = -1.0 if reverse else 1.0

    verts = mesh.vertices
    for d in range(1, dsegs + 1):
        along = math.cos(step * d) * segdist
        up = math.sin(step * d) * segdist * lift
        for r in range(rsegs + 1):
            if axis == "y":
                idx, prev = grid.index(r, d), grid.index(r, d - 1)
                _, py, pz = verts[prev]
                verts[idx] = (verts[idx][0], py + along, pz + up)
            else:
                idx, prev = grid.index(d, r), grid.index(d - 1, r)
                px, _, pz = verts[prev]
                verts[idx] = (px + along, verts[idx][1], pz + up)

    mesh.verts_need_update = True
    logger.debug("bent %s by %s degrees along %s", mesh.name, amount, axis)
    return mesh


# ---------
# Heightmap
# ---------

def apply_heightmap(mesh: Mesh, image: Union[ImageSource, NoiseField], strength: float = 1.0) -> Mesh:
    """Set each grid vertex's Z to the brightness of the nearest pixel.

    Brightness is the mean of the red, green and blue channels scaled to
    [0, 1] and multiplied by ``strength``. Pixels are picked by scaling the
    grid coordinate to the image size; there is no interpolation.
    """
    grid = _require_grid(mesh, "heightmap")
    if isinstance(image, NoiseField):
        image = image.to_pixels()
    w, h = image.width, image.height
    if w <= 0 or h <= 0:
        raise PreconditionError(f"heightmap image has no pixels ({w}x{h})")

    xint = w / grid.segments_x
    yint = h / grid.segments_y
    # sample everything before touching the mesh
    heights = []
    for y in range(grid.segments_y + 1):
        py = min(int(y * yint), h - 1)
        for x in range(grid.segments_x + 1):
            px = min(int(x * xint), w - 1)
            r, g, b, _ = image.get_pixel(px, py)
            heights.append(((r + g + b) / 3 / 255) * strength)

    verts = mesh.vertices
    for idx, z in enumerate(heights):
        vx, vy, _ = verts[idx]
        verts[idx] = (vx, vy, z)

    mesh.verts_need_update = True
    logger.debug("applied %dx%d heightmap to %s (strength %s)", w, h, mesh.name, strength)
    return mesh
