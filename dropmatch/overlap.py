import logging

from dropmatch.entities import DraggableItem, TargetSlot, is_compatible
from dropmatch.events import CandidateChanged
from dropmatch.listener import NULL_LISTENER

logger = logging.getLogger(__name__)


def release_candidate(item: DraggableItem):
    """Return the item's candidate to baseline scale and drop its claim."""
    target = item.candidate
    if target is None:
        return None
    target.reset_scale()
    if target.claimed_by == item.id:
        target.claimed_by = None
    item.candidate = None
    return target


class OverlapTracker:
    """
    Keeps ``item.candidate`` pointing at the compatible target the item currently overlaps.

    Item side: the last entered target wins.
    Target side: the first item to claim a target keeps it until it leaves, commits or aborts.
    """

    def __init__(self, item: DraggableItem, hover_scale=1.1, listener=NULL_LISTENER):
        self.item = item
        self.hover_scale = hover_scale
        self.listener = listener

    def on_overlap_begin(self, other):
        if not isinstance(other, TargetSlot):
            return
        item = self.item
        if not is_compatible(other.category, item.category):
            return
        if other is item.candidate:
            return
        if other.claimed_by is not None and other.claimed_by != item.id:
            logger.debug("item %s rejected by %s: already claimed by item %s", item.id, other.name, other.claimed_by)
            return
        previous = release_candidate(item)
        item.candidate = other
        other.claimed_by = item.id
        other.scale = other.baseline_scale * self.hover_scale
        logger.debug("item %s candidate -> %s", item.id, other.name)
        self.listener.on_event(CandidateChanged(item, previous, other))

    def on_overlap_end(self, other):
        item = self.item
        if item.candidate is None or other is not item.candidate:
            return
        release_candidate(item)
        logger.debug("item %s left %s", item.id, other.name)
        self.listener.on_event(CandidateChanged(item, other, None))
