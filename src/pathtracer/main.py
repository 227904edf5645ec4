# main.py
import argparse
import sys
from pathtracer.core.color import BLACK
from pathtracer.core.image import Image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES

# Samples per pixel, bounce budget and image width for each quality level
QUALITY_PRESETS = {
    "preview": {"samples": 4, "bounces": 8, "width": 200},
    "balanced": {"samples": 64, "bounces": 20, "width": 400},
    "final": {"samples": 400, "bounces": 50, "width": 800},
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="pathtracer",
                                     description="Render a built-in scene to an image file.")
    parser.add_argument("scene", choices=sorted(SCENES))
    parser.add_argument("--quality", choices=sorted(QUALITY_PRESETS), default="preview")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--aspect", type=float, default=16.0 / 9.0, help="width / height")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--bounces", type=int, help="maximum bounces per path")
    parser.add_argument("--threads", type=int, help="render threads (default: CPU count)")
    parser.add_argument("--output", default="output/result.png")
    parser.add_argument("--quiet", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    quality = QUALITY_PRESETS[args.quality]

    settings, world = SCENES[args.scene]()
    settings.samples = args.samples if args.samples is not None else quality["samples"]
    settings.max_bounces = args.bounces if args.bounces is not None else quality["bounces"]
    width = args.width if args.width is not None else quality["width"]

    target = Image.with_aspect_ratio(width, args.aspect, BLACK)
    camera = settings.build(target)
    renderer = Renderer(camera, num_threads=args.threads, verbose=not args.quiet)
    try:
        renderer.render_and_save(world, target, args.output)
    except Exception as e:
        print(f"Render failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
