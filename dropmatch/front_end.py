import logging
from dataclasses import dataclass

from dropmatch.entities import ItemTemplate
from dropmatch.events import FrontEndDeactivated
from dropmatch.geometry import Rect
from dropmatch.listener import NULL_LISTENER
from dropmatch.session import DragSession

logger = logging.getLogger(__name__)


@dataclass
class PointerState:
    """Polled pointer. ``pressed`` and ``released`` are edge flags valid for one frame."""

    x: float = 0.0
    y: float = 0.0
    pressed: bool = False
    held: bool = False
    released: bool = False

    def press(self, x, y):
        self.x, self.y = x, y
        self.pressed = True
        self.held = True

    def move(self, x, y):
        self.x, self.y = x, y

    def release(self, x, y):
        self.x, self.y = x, y
        self.held = False
        self.released = True

    def end_frame(self):
        self.pressed = False
        self.released = False


@dataclass(frozen=True)
class PointerEvent:
    x: float
    y: float


class PollingFrontEnd:
    """
    Palette control polled once per frame.
    Disables itself after its first matched drop.
    """

    def __init__(self, name, region: Rect, template: ItemTemplate, session: DragSession, pointer: PointerState, listener=NULL_LISTENER):
        self.name = name
        self.region = region
        self.template = template
        self.session = session
        self.pointer = pointer
        self.listener = listener
        self.active = True

    def tick(self):
        if not self.active:
            return
        pointer = self.pointer
        if pointer.pressed and not self.session.in_progress and self.region.contains(pointer.x, pointer.y):
            self.session.start(self.template, pointer.x, pointer.y)
        if pointer.held and self.session.in_progress:
            self.session.update(pointer.x, pointer.y)
        if pointer.released and self.session.in_progress:
            outcome = self.session.release()
            if outcome.matched:
                self.deactivate()

    def deactivate(self):
        if not self.active:
            return
        self.session.abort()
        self.active = False
        logger.info("control %r deactivated", self.name)
        self.listener.on_event(FrontEndDeactivated(self.name))


class EventDrivenFrontEnd:
    """
    Control driven by begin-drag / drag / end-drag callbacks from a pointer event source.
    Reusable for any number of drags.
    """

    def __init__(self, name, region: Rect, template: ItemTemplate, session: DragSession):
        self.name = name
        self.region = region
        self.template = template
        self.session = session
        self.active = True

    def on_begin_drag(self, event: PointerEvent) -> bool:
        if self.session.in_progress or not self.region.contains(event.x, event.y):
            return False
        # start() already performs the first position update.
        self.session.start(self.template, event.x, event.y)
        return True

    def on_drag(self, event: PointerEvent):
        if self.session.in_progress:
            self.session.update(event.x, event.y)

    def on_end_drag(self, event: PointerEvent):
        if not self.session.in_progress:
            return None
        self.session.update(event.x, event.y)
        return self.session.release()
