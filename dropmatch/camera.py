import math

from dropmatch.geometry import Ray, Vec3


class Camera:
    """
    Pinhole camera looking along +z, tilted down by ``pitch_deg``.
    Screen coordinates use a top-left origin with y growing downwards.
    """

    def __init__(self, position: Vec3 = Vec3(0.0, 0.0, -10.0), pitch_deg=0.0, fov_deg=60.0, width=1200, height=760):
        self.position = position
        self.pitch_deg = pitch_deg
        self.fov_deg = fov_deg
        self.width = width
        self.height = height

    def resize(self, width, height):
        self.width = max(1, int(width))
        self.height = max(1, int(height))

    def _half_extents(self):
        t = math.tan(math.radians(self.fov_deg) / 2)
        return t * self.width / self.height, t

    def _view_direction(self, sx, sy) -> Vec3:
        # Unnormalized: the forward component in camera space is exactly 1.
        half_w, half_h = self._half_extents()
        nx = (2.0 * sx / self.width - 1.0) * half_w
        ny = (1.0 - 2.0 * sy / self.height) * half_h
        p = math.radians(self.pitch_deg)
        c, s = math.cos(p), math.sin(p)
        return Vec3(nx, ny * c - s, ny * s + c)

    def screen_to_world(self, sx, sy, depth) -> Vec3:
        """World point under the screen coordinate, ``depth`` units in front of the camera."""
        return self.position + self._view_direction(sx, sy).scaled(depth)

    def screen_point_to_ray(self, sx, sy) -> Ray:
        return Ray(self.position, self._view_direction(sx, sy).normalized())

    def world_to_screen(self, point: Vec3):
        """Inverse projection. Returns None for points behind the camera."""
        d = point - self.position
        p = math.radians(self.pitch_deg)
        c, s = math.cos(p), math.sin(p)
        y_cam = d.y * c + d.z * s
        z_cam = -d.y * s + d.z * c
        if z_cam <= 0:
            return None
        half_w, half_h = self._half_extents()
        nx = d.x / z_cam / half_w
        ny = y_cam / z_cam / half_h
        return (nx + 1.0) * self.width / 2.0, (1.0 - ny) * self.height / 2.0

    def depth_of(self, point: Vec3) -> float:
        d = point - self.position
        p = math.radians(self.pitch_deg)
        return -d.y * math.sin(p) + d.z * math.cos(p)
