from __future__ import annotations

import argparse
import logging
import math

from .config import UVMethod
from .errors import ElementalError
from .export import save_obj
from .image import PixelBuffer
from .modifiers import apply_heightmap, bend
from .noise import perlin_noise
from .shapes import cube, plane, ribbon, tire

logger = logging.getLogger(__name__)

_DEF_HELP = """
Examples:
  python -m elemental --shape plane --size 4 2 --segments 16 8 --uv spanning --out plane.obj
  python -m elemental --shape plane --segments 64 64 --heightmap height.png --strength 0.5 --out terrain.obj
  python -m elemental --shape plane --segments 32 1 --bend x 180 --out arch.obj
  python -m elemental --shape cube --size 2 --uv atlas_cross --out box.obj
  python -m elemental --shape tire --radius 1 --width 0.4 --radial 48 --out tire.obj
  python -m elemental --shape noise --noise-size 256 256 --octaves 6 --seed 7 --out noise.png
"""


def _wave_path(count: int, length: float):
    # sample a sine wave along X for the ribbon demo
    last = max(count - 1, 1)
    return [(length * i / last, 0.0, math.sin(i / last * 2 * math.pi)) for i in range(count)]


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="elemental", description="elemental: shared-vertex mesh and noise generator",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--shape", required=True, choices=["plane", "cube", "ribbon", "tire", "noise"])
    p.add_argument("--out", required=True, help="Output path (.obj for meshes, image file for noise)")
    p.add_argument("--uv", choices=[m.name.lower() for m in UVMethod], default="tiled")
    p.add_argument("--size", type=float, nargs="+", default=[1.0],
                   help="Cube edge, or plane width [height]")
    p.add_argument("--segments", type=int, nargs=2, default=[1, 1], metavar=("X", "Y"))
    p.add_argument("--pivot", type=float, nargs=3, default=[0.0, 0.0, 0.0], metavar=("X", "Y", "Z"))
    p.add_argument("--vertex-normals", action="store_true")
    p.add_argument("--radius", type=float, default=1.0)
    p.add_argument("--width", type=float, default=0.5)
    p.add_argument("--radial", type=int, default=16)
    p.add_argument("--chamfering", type=float, default=0.8)
    p.add_argument("--points", type=int, default=16, help="Ribbon path samples")
    p.add_argument("--height", type=float, default=1.0, help="Ribbon height")
    p.add_argument("--bend", nargs=2, metavar=("AXIS", "DEGREES"))
    p.add_argument("--reverse", action="store_true", help="Bend towards -Z")
    p.add_argument("--heightmap", help="Image displacing the plane along Z")
    p.add_argument("--strength", type=float, default=1.0)
    p.add_argument("--noise-size", type=int, nargs=2, default=[128, 128], metavar=("W", "H"))
    p.add_argument("--octaves", type=int, default=5)
    p.add_argument("--seed", type=int)
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def _run(args: argparse.Namespace) -> None:
    if args.shape == "noise":
        w, h = args.noise_size
        field = perlin_noise(w, h, args.octaves, rng=args.seed)
        field.to_image().save(args.out)
        logger.info("wrote %s (%dx%d, %d octaves)", args.out, w, h, args.octaves)
        return

    options = dict(
        uv_method=UVMethod[args.uv.upper()],
        pivot=tuple(args.pivot),
        vertex_normals=args.vertex_normals,
    )
    if args.shape == "plane":
        width = args.size[0]
        height = args.size[1] if len(args.size) > 1 else width
        mesh = plane(width, height, segments_x=args.segments[0], segments_y=args.segments[1], **options)
    elif args.shape == "cube":
        mesh = cube(args.size[0], **options)
    elif args.shape == "ribbon":
        mesh = ribbon(_wave_path(args.points, args.size[0] * 4), args.height, **options)
    else:
        mesh = tire(args.radius, args.width, args.radial, args.chamfering, **options)

    if args.bend:
        axis, degrees = args.bend
        bend(mesh, axis, degrees, reverse=args.reverse)
    if args.heightmap:
        apply_heightmap(mesh, PixelBuffer.open(args.heightmap), args.strength)
    if args.bend or args.heightmap:
        mesh.compute_normals(face=True, vertex=args.vertex_normals)
    save_obj(args.out, mesh)


def main(argv=None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.bend:
        try:
            args.bend = (args.bend[0], float(args.bend[1]))
        except ValueError:
            parser.error(f"--bend: invalid angle {args.bend[1]!r}")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        _run(args)
    except ElementalError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
