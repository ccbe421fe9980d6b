import math

import numpy as np
import pytest

from elemental import (
    NoiseField,
    PixelBuffer,
    PreconditionError,
    UnsupportedAxisError,
    apply_heightmap,
    bend,
    cube,
    plane,
)


@pytest.mark.parametrize("axis", ["x", "y"])
def test_bend_zero_is_identity(axis):
    mesh = plane(3, 2, segments_x=6, segments_y=4)
    before = mesh.copy()
    out = bend(mesh, axis, 0.0)
    assert out is mesh
    for a, b in zip(before.vertices, mesh.vertices):
        assert b == pytest.approx(a)


def test_bend_full_circle_closes_loop_along_y():
    segs = 12
    mesh = plane(2, 6, segments_x=2, segments_y=segs)
    grid = mesh.grid
    bend(mesh, "y", 360.0)
    for x in range(grid.segments_x + 1):
        first = mesh.vertices[grid.index(x, 0)]
        last = mesh.vertices[grid.index(x, segs)]
        assert last == pytest.approx(first, abs=1e-9)


def test_bend_full_circle_closes_loop_along_x():
    segs = 16
    mesh = plane(4, 1, segments_x=segs, segments_y=3)
    grid = mesh.grid
    bend(mesh, "x", 360.0)
    for y in range(grid.segments_y + 1):
        assert mesh.vertices[grid.index(segs, y)] == pytest.approx(
            mesh.vertices[grid.index(0, y)], abs=1e-9)


def test_bend_half_circle_rises_and_reverse_sinks():
    segs = 8
    up = bend(plane(2, 1, segments_x=segs, segments_y=1), "x", 180.0)
    down = bend(plane(2, 1, segments_x=segs, segments_y=1), "x", 180.0, reverse=True)
    seg = 2 / segs
    expected = sum(math.sin(math.pi / segs * i) * seg for i in range(1, segs + 1))
    last = up.grid.index(segs, 0)
    assert up.vertices[last][2] == pytest.approx(expected)
    assert down.vertices[last][2] == pytest.approx(-expected)
    assert up.vertices[last][0] == pytest.approx(down.vertices[last][0])
    # every column of one row stays together
    assert up.vertices[up.grid.index(segs, 1)] == pytest.approx(
        (up.vertices[last][0], 0.5, up.vertices[last][2]))


def test_bend_keeps_topology():
    mesh = plane(2, 2, segments_x=4, segments_y=4)
    faces, uvs = list(mesh.faces), list(mesh.face_uvs)
    bend(mesh, "y", 90.0)
    assert mesh.faces == faces
    assert mesh.face_uvs == uvs
    assert mesh.verts_need_update


def test_bend_rejects_unknown_axis_without_touching_mesh():
    mesh = plane(1, 1, segments_x=2, segments_y=2)
    before = list(mesh.vertices)
    with pytest.raises(UnsupportedAxisError):
        bend(mesh, "z", 45.0)
    assert mesh.vertices == before
    assert not mesh.verts_need_update


def test_bend_requires_plane():
    with pytest.raises(PreconditionError):
        bend(cube(1.0), "x", 45.0)


@pytest.mark.parametrize("strength", [1.0, 2.5])
def test_heightmap_white_sets_strength(strength):
    mesh = plane(2, 2, segments_x=3, segments_y=5)
    image = PixelBuffer.filled(7, 4, (255, 255, 255, 255))
    out = apply_heightmap(mesh, image, strength)
    assert out is mesh
    assert all(v[2] == pytest.approx(strength) for v in mesh.vertices)
    assert mesh.verts_need_update


def test_heightmap_black_is_flat():
    mesh = plane(2, 2, segments_x=3, segments_y=3)
    bend(mesh, "x", 30.0)
    apply_heightmap(mesh, PixelBuffer.filled(8, 8, (0, 0, 0, 255)), 3.0)
    assert all(v[2] == 0.0 for v in mesh.vertices)


def test_heightmap_samples_nearest_pixel():
    data = np.zeros((1, 2, 4), dtype=np.uint8)
    data[0, 1] = (255, 255, 255, 255)
    mesh = plane(2, 1, segments_x=2, segments_y=1)
    apply_heightmap(mesh, PixelBuffer(data), 2.0)
    grid = mesh.grid
    for y in range(2):
        assert mesh.vertices[grid.index(0, y)][2] == 0.0
        assert mesh.vertices[grid.index(1, y)][2] == pytest.approx(2.0)
        assert mesh.vertices[grid.index(2, y)][2] == pytest.approx(2.0)


def test_heightmap_averages_channels():
    mesh = plane(1, 1)
    apply_heightmap(mesh, PixelBuffer.filled(2, 2, (255, 0, 0, 255)))
    assert mesh.vertices[0][2] == pytest.approx(1 / 3)


def test_heightmap_keeps_xy():
    mesh = plane(2, 2, segments_x=2, segments_y=2)
    before = [(x, y) for x, y, _ in mesh.vertices]
    apply_heightmap(mesh, PixelBuffer.filled(4, 4, (128, 128, 128, 255)))
    assert [(x, y) for x, y, _ in mesh.vertices] == before


def test_heightmap_accepts_noise_field():
    mesh = plane(1, 1, segments_x=4, segments_y=4)
    apply_heightmap(mesh, NoiseField(np.ones((8, 8))), 0.5)
    assert all(v[2] == pytest.approx(0.5) for v in mesh.vertices)


class _FailingSource:
    width = 4
    height = 4

    def get_pixel(self, x, y):
        if y > 0:
            raise IndexError("row out of range")
        return (255, 255, 255, 255)


def test_heightmap_failure_leaves_mesh_untouched():
    mesh = plane(1, 1, segments_x=2, segments_y=2)
    before = list(mesh.vertices)
    with pytest.raises(IndexError):
        apply_heightmap(mesh, _FailingSource())
    assert mesh.vertices == before
    assert not mesh.verts_need_update


def test_heightmap_preconditions():
    with pytest.raises(PreconditionError):
        apply_heightmap(cube(1.0), PixelBuffer.filled(2, 2, (0, 0, 0, 255)))
    mesh = plane(1, 1)
    with pytest.raises(PreconditionError):
        apply_heightmap(mesh, PixelBuffer(np.zeros((0, 0, 4))))
    assert not mesh.verts_need_update
