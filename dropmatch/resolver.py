import logging

from dropmatch.entities import NO_MATCH, DraggableItem, MatchOutcome, Outcome
from dropmatch.overlap import release_candidate

logger = logging.getLogger(__name__)


class DragStateError(RuntimeError):
    pass


def copy_part_materials(target, source, part_name) -> bool:
    """Copy the full material array of one named part. Missing parts or renderers are skipped."""
    target_part = target.find_part(part_name)
    source_part = source.find_part(part_name)
    if target_part is None or source_part is None:
        return False
    if target_part.renderer is None or source_part.renderer is None:
        return False
    target_part.renderer.materials = source_part.renderer.shared_materials
    return True


class DropResolver:
    def __init__(self, world, required_parts=("Base", "icing")):
        self.world = world
        self.required_parts = tuple(required_parts)

    def commit(self, item: DraggableItem) -> MatchOutcome:
        if not item.alive:
            raise DragStateError(f"item {item.id} was already committed")
        target = release_candidate(item)
        if target is None:
            outcome = NO_MATCH
            logger.info("item %s dropped without a match", item.id)
        else:
            for part_name in self.required_parts:
                copy_part_materials(target, item, part_name)
            outcome = MatchOutcome(Outcome.MATCHED, target)
            logger.info("item %s matched %s", item.id, target.name)
        self.destroy(item)
        return outcome

    def destroy(self, item: DraggableItem):
        self.world.remove_item(item)
        item.candidate = None
        item.alive = False
