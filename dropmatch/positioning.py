from typing import Optional

from dropmatch.camera import Camera
from dropmatch.entities import DraggableItem
from dropmatch.geometry import Vec3


class PositioningStrategy:
    """Maps a pointer screen coordinate to a world position for the dragged item."""

    def position_for(self, item: Optional[DraggableItem], sx, sy) -> Optional[Vec3]:
        raise NotImplementedError


class CameraProjection(PositioningStrategy):
    def __init__(self, camera: Camera, depth_offset=3.0):
        self.camera = camera
        self.depth_offset = depth_offset

    def position_for(self, item, sx, sy):
        return self.camera.screen_to_world(sx, sy, self.depth_offset)


class SurfaceRaycast(PositioningStrategy):
    """
    Rests the item on the first placement surface under the pointer.
    Returns None on a miss so the item keeps its previous position.
    """

    def __init__(self, camera: Camera, world, surface_tag="Ground"):
        self.camera = camera
        self.world = world
        self.surface_tag = surface_tag

    def position_for(self, item, sx, sy):
        ray = self.camera.screen_point_to_ray(sx, sy)
        for hit in self.world.raycast_all(ray):
            if hit.tag != self.surface_tag:
                continue
            height = item.size.y if item is not None else 0.0
            return hit.point.with_y(hit.point.y + height / 2)
        return None
