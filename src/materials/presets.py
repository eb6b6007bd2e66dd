# materials/presets.py
from core.vector import Color
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.textures import CheckerTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def polished_bronze() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

class DielectricPresets:
    """Predefined dielectric materials."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class ColorPresets:
    """Common color presets for materials."""

    BROWN = Color(0.4, 0.2, 0.1)
    GROUND_GREEN = Color(0.2, 0.3, 0.1)
    OFF_WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(even: Color = None, odd: Color = None, scale: float = 10.0) -> CheckerTexture:
        """Create a checker texture with default or custom colors."""
        if even is None:
            even = ColorPresets.GROUND_GREEN
        if odd is None:
            odd = ColorPresets.OFF_WHITE
        return CheckerTexture.from_colors(even, odd, scale)
