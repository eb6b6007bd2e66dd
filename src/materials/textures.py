# materials/textures.py
import math
from core.vector import Vector3

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Color of the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(sx)*sin(sy)*sin(sz) picks between
    the even and odd textures, so the pattern does not depend on (u, v).
    """
    def __init__(self, even: Texture, odd: Texture, scale: float = 10.0):
        self.even = even
        self.odd = odd
        self.scale = scale

    @classmethod
    def from_colors(cls, even: Vector3, odd: Vector3, scale: float = 10.0) -> "CheckerTexture":
        return cls(SolidTexture(even), SolidTexture(odd), scale)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x) *
                 math.sin(self.scale * p.y) *
                 math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)
