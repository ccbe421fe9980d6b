from __future__ import annotations

import logging

from .mesh import Mesh

logger = logging.getLogger(__name__)


def save_obj(path: str, mesh: Mesh) -> None:
    """Save a Wavefront OBJ.

    Texture coordinates are written per face corner (one ``vt`` per corner) so
    shared vertices keep their per-face UVs. Vertex normals are written when
    present and aligned with the vertices.
    """
    mesh.validate()
    use_vt = bool(mesh.face_uvs)
    use_vn = mesh.normals is not None and len(mesh.normals) == len(mesh.vertices)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"o {mesh.name}\n")
        for x, y, z in mesh.vertices:
            f.write(f"v {x:.6f} {y:.6f} {z:.6f}\n")
        if use_vt:
            for corners in mesh.face_uvs:
                for u, v in corners:
                    f.write(f"vt {u:.6f} {v:.6f}\n")
        if use_vn:
            for nx, ny, nz in mesh.normals:
                f.write(f"vn {nx:.6f} {ny:.6f} {nz:.6f}\n")
        for fi, face in enumerate(mesh.faces):
            refs = []
            for corner, i in enumerate(face):
                vi = i + 1
                ti = fi * 3 + corner + 1
                if use_vt and use_vn:
                    refs.append(f"{vi}/{ti}/{vi}")
                elif use_vt:
                    refs.append(f"{vi}/{ti}")
                elif use_vn:
                    refs.append(f"{vi}//{vi}")
                else:
                    refs.append(f"{vi}")
            f.write("f " + " ".join(refs) + "\n")
    logger.info("wrote %s (%d vertices, %d faces)", path, len(mesh.vertices), len(mesh.faces))
