# renderer/image_output.py
import numpy as np
from PIL import Image

def write_ppm(pixels: np.ndarray, stream) -> None:
    """
    Write an (height, width, 3) uint8 image as plain-text PPM (P3), rows top to bottom.
    """
    height, width = pixels.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in pixels.reshape(-1, 3):
        stream.write(f"{r} {g} {b}\n")

def save_png(pixels: np.ndarray, path: str) -> None:
    """Save an (height, width, 3) uint8 image with Pillow."""
    Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)
