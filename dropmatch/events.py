from dataclasses import dataclass
from typing import Optional

from dropmatch.entities import DraggableItem, MatchOutcome, TargetSlot
from dropmatch.geometry import Vec3


class DragEvent:
    pass


@dataclass(frozen=True)
class ItemSpawned(DragEvent):
    item: DraggableItem
    source: str


@dataclass(frozen=True)
class ItemMoved(DragEvent):
    item: DraggableItem
    position: Vec3


@dataclass(frozen=True)
class CandidateChanged(DragEvent):
    item: DraggableItem
    previous: Optional[TargetSlot]
    current: Optional[TargetSlot]


@dataclass(frozen=True)
class DropCommitted(DragEvent):
    item: DraggableItem
    outcome: MatchOutcome


@dataclass(frozen=True)
class DragAborted(DragEvent):
    item: DraggableItem


@dataclass(frozen=True)
class FrontEndDeactivated(DragEvent):
    source: str
