from dataclasses import dataclass

from dropmatch.entities import DraggableItem, Surface, TargetSlot
from dropmatch.geometry import Ray, Vec3


@dataclass(frozen=True)
class RaycastHit:
    collider: object
    tag: str
    point: Vec3
    distance: float


class _TrackedItem:
    def __init__(self, item, handler):
        self.item = item
        self.handler = handler
        self.overlapping = []


class SceneWorld:
    """
    In-memory spatial subsystem: trigger volumes for targets, static surfaces for raycasts.

    Overlap notifications are delivered synchronously from ``add_item`` and ``move_item``.
    The handler must expose ``on_overlap_begin(other)`` and ``on_overlap_end(other)``.
    """

    def __init__(self):
        self.targets = []
        self.surfaces = []
        self._items = {}

    def add_target(self, target: TargetSlot):
        self.targets.append(target)
        return target

    def add_surface(self, surface: Surface):
        self.surfaces.append(surface)
        return surface

    @property
    def items(self):
        return [tracked.item for tracked in self._items.values()]

    def add_item(self, item: DraggableItem, handler):
        tracked = _TrackedItem(item, handler)
        self._items[item.id] = tracked
        self._refresh(tracked)

    def move_item(self, item: DraggableItem, position: Vec3):
        item.position = position
        tracked = self._items.get(item.id)
        if tracked is not None:
            self._refresh(tracked)

    def remove_item(self, item: DraggableItem):
        # Destroying a volume does not raise overlap-end notifications.
        tracked = self._items.pop(item.id, None)
        if tracked is not None:
            self._hand_over(tracked.overlapping)

    def _refresh(self, tracked: _TrackedItem):
        volume = tracked.item.volume
        before = tracked.overlapping
        now = [target for target in self.targets if volume.overlaps(target.volume)]
        ended = [target for target in before if target not in now]
        begun = [target for target in now if target not in before]
        tracked.overlapping = now
        for target in ended:
            tracked.handler.on_overlap_end(target)
        for target in begun:
            tracked.handler.on_overlap_begin(target)
        self._hand_over(before + begun)

    def _hand_over(self, targets):
        """Re-deliver overlap-begin for unclaimed targets to idle items still inside them."""
        for target in targets:
            if target.claimed_by is not None:
                continue
            for tracked in list(self._items.values()):
                if tracked.item.candidate is None and target in tracked.overlapping:
                    tracked.handler.on_overlap_begin(target)
                    if target.claimed_by is not None:
                        break

    def raycast_all(self, ray: Ray):
        hits = []
        for surface in self.surfaces:
            distance = surface.box.intersect(ray)
            if distance is not None:
                hits.append(RaycastHit(surface, surface.tag, ray.point_at(distance), distance))
        for target in self.targets:
            distance = target.volume.intersect(ray)
            if distance is not None:
                hits.append(RaycastHit(target, target.category.value, ray.point_at(distance), distance))
        hits.sort(key=lambda hit: hit.distance)
        return hits
