# renderer/tone_mapping.py
import numpy as np

def gamma_correct(accumulated, samples_per_pixel: int) -> np.ndarray:
    """
    Average summed samples, apply gamma-2 correction and quantize to 8 bits.

    Each channel becomes int(256 * clamp(sqrt(value / samples), 0, 0.999)), so
    saturated channels land on 255 rather than 256.
    """
    scaled = np.asarray(accumulated, dtype=np.float64) / samples_per_pixel
    mapped = np.sqrt(np.maximum(scaled, 0.0))
    output = (256.0 * np.clip(mapped, 0.0, 0.999)).astype(np.uint8)
    return output

def color_code(color, samples_per_pixel: int = 1) -> tuple:
    """
    Quantize a single accumulated color to an (r, g, b) tuple of ints.
    """
    r, g, b = gamma_correct(np.array([color.x, color.y, color.z]), samples_per_pixel)
    return int(r), int(g), int(b)
