from elemental import plane, save_obj


def _lines(path, prefix):
    return [line for line in path.read_text().splitlines() if line.startswith(prefix)]


def test_obj_writes_per_face_uvs(tmp_path):
    path = tmp_path / "plane.obj"
    save_obj(str(path), plane(2, 2))
    assert len(_lines(path, "v ")) == 4
    assert len(_lines(path, "vt ")) == 6
    assert _lines(path, "vn ") == []
    assert _lines(path, "f ") == ["f 1/1 2/2 3/3", "f 2/4 4/5 3/6"]
    assert _lines(path, "v ")[0] == "v -1.000000 -1.000000 0.000000"


def test_obj_with_vertex_normals(tmp_path):
    path = tmp_path / "plane.obj"
    save_obj(str(path), plane(2, 2, vertex_normals=True))
    assert len(_lines(path, "vn ")) == 4
    assert _lines(path, "f ")[0] == "f 1/1/1 2/2/2 3/3/3"
