from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PartView:
    name: str
    color: Optional[str]


@dataclass(frozen=True)
class SlotView:
    name: str
    category: str
    screen: Optional[tuple[float, float]]
    radius: float
    scale: float
    enlarged: bool
    parts: tuple[PartView, ...]


@dataclass(frozen=True)
class ItemView:
    id: int
    screen: Optional[tuple[float, float]]
    radius: float
    candidate: Optional[str]
    parts: tuple[PartView, ...]


@dataclass(frozen=True)
class ControlView:
    name: str
    rect: tuple[float, float, float, float]
    template_name: str
    active: bool
    parts: tuple[PartView, ...]


@dataclass(frozen=True)
class SceneViewModel:
    slots: tuple[SlotView, ...]
    items: tuple[ItemView, ...]
    controls: tuple[ControlView, ...]
