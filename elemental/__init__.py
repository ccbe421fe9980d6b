"""
elemental: shared-vertex procedural meshes, UV layouts, plane modifiers and
multi-octave value noise.
"""
from .config import ShapeConfig, UVMethod
from .errors import (
    ElementalError,
    InsufficientDataError,
    InvalidShapeError,
    PreconditionError,
    UnsupportedAxisError,
)
from .export import save_obj
from .image import ImageSource, PixelBuffer, blend_textures
from .mesh import GridMeta, Mesh
from .modifiers import apply_heightmap, bend
from .noise import NoiseField, blend_octaves, perlin_noise, smooth_noise, white_noise
from .shapes import cube, plane, ribbon, tire
from .uv import set_uvs

__version__ = "0.1.0"
__all__ = [
    "ShapeConfig", "UVMethod",
    "ElementalError", "InsufficientDataError", "InvalidShapeError", "PreconditionError",
    "UnsupportedAxisError",
    "save_obj",
    "ImageSource", "PixelBuffer", "blend_textures",
    "GridMeta", "Mesh",
    "apply_heightmap", "bend",
    "NoiseField", "blend_octaves", "perlin_noise", "smooth_noise", "white_noise",
    "cube", "plane", "ribbon", "tire",
    "set_uvs",
]
