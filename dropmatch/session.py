import logging
from enum import Enum

from dropmatch.entities import DraggableItem, ItemTemplate, MatchOutcome
from dropmatch.events import DragAborted, DropCommitted, ItemMoved, ItemSpawned
from dropmatch.geometry import Vec3
from dropmatch.listener import NULL_LISTENER
from dropmatch.overlap import OverlapTracker, release_candidate
from dropmatch.positioning import PositioningStrategy
from dropmatch.resolver import DragStateError, DropResolver

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "Idle"
    DRAGGING = "Dragging"


class DragSession:
    """
    Lifecycle of one dragged item: Idle -> Dragging -> Idle.

    start/update/release are called by a front-end; abort is the forced exit
    used when the owning control goes away mid-gesture.
    """

    def __init__(
        self,
        world,
        resolver: DropResolver,
        positioner: PositioningStrategy,
        hover_scale=1.1,
        listener=NULL_LISTENER,
        source="",
    ):
        self.world = world
        self.resolver = resolver
        self.positioner = positioner
        self.hover_scale = hover_scale
        self.listener = listener
        self.source = source

        self.state = SessionState.IDLE
        self.item: DraggableItem = None
        self.tracker: OverlapTracker = None

    @property
    def in_progress(self) -> bool:
        return self.state is SessionState.DRAGGING

    def start(self, template: ItemTemplate, sx, sy) -> DraggableItem:
        if self.in_progress:
            raise DragStateError(f"session {self.source!r} is already dragging item {self.item.id}")
        item = template.instantiate(Vec3())
        position = self.positioner.position_for(item, sx, sy)
        if position is not None:
            item.position = position
        self.item = item
        self.tracker = OverlapTracker(item, self.hover_scale, self.listener)
        self.state = SessionState.DRAGGING
        logger.debug("session %r spawned item %s (%s)", self.source, item.id, template.name)
        self.listener.on_event(ItemSpawned(item, self.source))
        self.world.add_item(item, self.tracker)
        return item

    def update(self, sx, sy) -> bool:
        """One tick of position update. Returns False when the strategy found no position."""
        if not self.in_progress:
            raise DragStateError(f"session {self.source!r} is idle")
        position = self.positioner.position_for(self.item, sx, sy)
        if position is None:
            return False
        self.world.move_item(self.item, position)
        self.listener.on_event(ItemMoved(self.item, position))
        return True

    def release(self) -> MatchOutcome:
        if not self.in_progress:
            raise DragStateError(f"session {self.source!r} has nothing to release")
        item = self.item
        try:
            outcome = self.resolver.commit(item)
        finally:
            self._clear()
        self.listener.on_event(DropCommitted(item, outcome))
        return outcome

    def abort(self) -> bool:
        if not self.in_progress:
            return False
        item = self.item
        release_candidate(item)
        self.resolver.destroy(item)
        self._clear()
        logger.info("session %r aborted item %s", self.source, item.id)
        self.listener.on_event(DragAborted(item))
        return True

    def _clear(self):
        self.item = None
        self.tracker = None
        self.state = SessionState.IDLE
