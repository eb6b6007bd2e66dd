# main.py
import argparse
import os
import sys
import numpy as np
from renderer.raytracer import MAX_DEPTH, Renderer
from renderer.image_output import write_ppm, save_png
from scenes import SCENES

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a sphere scene with a stochastic path tracer and write it as PPM to stdout.")
    parser.add_argument("-s", "--samples", type=int, default=100,
                        help="Samples to shoot per pixel")
    parser.add_argument("-w", "--width", type=int, default=100,
                        help="Width in pixels of the image")
    parser.add_argument("--aspect-ratio-width", type=int, default=3,
                        help="Aspect ratio (width)")
    parser.add_argument("--aspect-ratio-height", type=int, default=2,
                        help="Aspect ratio (height)")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random",
                        help="Scene to render")
    parser.add_argument("--workers", type=int, default=os.cpu_count(),
                        help="Worker processes; 1 renders in the current process")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible scenes and renders")
    parser.add_argument("--png", metavar="PATH", default=None,
                        help="Also save the image as PNG")
    parser.add_argument("--all-axes", action="store_true",
                        help="Let the BVH split along all three axes instead of x and y only")
    return parser.parse_args(argv)

class Application:
    def __init__(self, args: argparse.Namespace, out=None):
        self.args = args
        self.out = out if out is not None else sys.stdout
        self.aspect_ratio = args.aspect_ratio_width / args.aspect_ratio_height
        self.image_width = args.width
        self.image_height = int(self.image_width / self.aspect_ratio)
        self.seed = args.seed if args.seed is not None else np.random.SeedSequence().entropy

    def create_scene(self):
        print("=== Building Scene ===", file=sys.stderr)
        rng = np.random.default_rng(self.seed)
        return SCENES[self.args.scene](self.aspect_ratio, rng, sample_all_axes=self.args.all_axes)

    def run(self):
        scene = self.create_scene()
        renderer = Renderer(self.image_width, self.image_height,
                            samples_per_pixel=self.args.samples,
                            max_depth=MAX_DEPTH,
                            workers=self.args.workers,
                            seed=self.seed)

        print("=== Rendering ===", file=sys.stderr)
        print(f"Render resolution: {self.image_width}x{self.image_height}", file=sys.stderr)
        print(f"Samples per pixel: {self.args.samples}", file=sys.stderr)
        pixels = renderer.render(scene.camera, scene.world)

        write_ppm(pixels, self.out)
        if self.args.png:
            save_png(pixels, self.args.png)
            print(f"Saved PNG to {self.args.png}", file=sys.stderr)
        return pixels

def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        Application(args).run()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
