import math
from dataclasses import dataclass

EPSILON = 1e-9


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __add__(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> "Vec3":
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vec3":
        n = self.length()
        if n < EPSILON:
            return Vec3()
        return self.scaled(1.0 / n)

    def with_y(self, y: float) -> "Vec3":
        return Vec3(self.x, y, self.z)


@dataclass(frozen=True)
class Rect:
    """Screen-space rectangle, top-left origin."""

    x: float
    y: float
    w: float
    h: float

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


@dataclass(frozen=True)
class Ray:
    origin: Vec3
    direction: Vec3

    def point_at(self, distance: float) -> Vec3:
        return self.origin + self.direction.scaled(distance)


@dataclass(frozen=True)
class Box:
    """Axis-aligned box given by its center and half extents."""

    center: Vec3
    half: Vec3

    @property
    def min(self) -> Vec3:
        return self.center - self.half

    @property
    def max(self) -> Vec3:
        return self.center + self.half

    def overlaps(self, other: "Box") -> bool:
        # Touching faces do not count as an overlap.
        for a_lo, a_hi, b_lo, b_hi in zip(self.min, self.max, other.min, other.max):
            if a_hi <= b_lo or b_hi <= a_lo:
                return False
        return True

    def intersect(self, ray: Ray):
        """Slab test. Returns the entry distance along the ray, or None."""
        t_near = 0.0
        t_far = math.inf
        for origin, direction, lo, hi in zip(ray.origin, ray.direction, self.min, self.max):
            if abs(direction) < EPSILON:
                if origin < lo or origin > hi:
                    return None
                continue
            t1 = (lo - origin) / direction
            t2 = (hi - origin) / direction
            if t1 > t2:
                t1, t2 = t2, t1
            t_near = max(t_near, t1)
            t_far = min(t_far, t2)
            if t_near > t_far:
                return None
        return t_near
