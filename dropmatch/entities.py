import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from dropmatch.geometry import Box, Vec3

_ids = itertools.count(1)


def next_id() -> int:
    return next(_ids)


class Category(Enum):
    CUPCAKE = "Cupcake"
    LAYER_CAKE = "LayerCake"
    DONUT = "Donut"
    COOKIE = "Cookie"


def is_compatible(a: Category, b: Category) -> bool:
    return a is b


@dataclass(frozen=True)
class Appearance:
    """A renderable material descriptor."""

    name: str
    color: str


class MeshRenderer:
    def __init__(self, materials=()):
        self._materials = tuple(materials)

    @property
    def materials(self):
        return self._materials

    @materials.setter
    def materials(self, value):
        self._materials = tuple(value)

    @property
    def shared_materials(self):
        # Always the full array, even when several materials share one renderer.
        return self._materials

    @property
    def primary(self) -> Optional[Appearance]:
        return self._materials[0] if self._materials else None


@dataclass
class Part:
    name: str
    renderer: Optional[MeshRenderer] = None


def find_part(parts, name) -> Optional[Part]:
    for part in parts:
        if part.name == name:
            return part
    return None


@dataclass(frozen=True)
class ItemTemplate:
    """Blueprint that a front-end instantiates on every drag start."""

    name: str
    category: Category
    size: Vec3
    appearances: tuple  # ((part_name, (Appearance, ...)), ...)

    def instantiate(self, position: Vec3) -> "DraggableItem":
        parts = [Part(name, MeshRenderer(materials)) for name, materials in self.appearances]
        return DraggableItem(
            id=next_id(),
            category=self.category,
            position=position,
            size=self.size,
            parts=parts,
            template_name=self.name,
        )


@dataclass(eq=False)
class DraggableItem:
    id: int
    category: Category
    position: Vec3
    size: Vec3
    parts: list
    template_name: str = ""
    candidate: Optional["TargetSlot"] = None
    alive: bool = True

    @property
    def volume(self) -> Box:
        return Box(self.position, self.size.scaled(0.5))

    def find_part(self, name) -> Optional[Part]:
        return find_part(self.parts, name)


@dataclass(eq=False)
class TargetSlot:
    name: str
    category: Category
    position: Vec3
    size: Vec3
    parts: list
    baseline_scale: float = 1.0
    scale: Optional[float] = None
    claimed_by: Optional[int] = None
    id: int = field(default_factory=next_id)

    def __post_init__(self):
        if self.scale is None:
            self.scale = self.baseline_scale

    @property
    def volume(self) -> Box:
        return Box(self.position, self.size.scaled(0.5))

    @property
    def enlarged(self) -> bool:
        return self.scale != self.baseline_scale

    def reset_scale(self):
        self.scale = self.baseline_scale

    def find_part(self, name) -> Optional[Part]:
        return find_part(self.parts, name)


@dataclass(frozen=True)
class Surface:
    """Static collider used by world raycasts, e.g. the ground."""

    name: str
    tag: str
    box: Box


class Outcome(Enum):
    MATCHED = "Matched"
    NO_MATCH = "NoMatch"


@dataclass(frozen=True)
class MatchOutcome:
    kind: Outcome
    target: Optional[TargetSlot] = None

    @property
    def matched(self) -> bool:
        return self.kind is Outcome.MATCHED


NO_MATCH = MatchOutcome(Outcome.NO_MATCH)


@dataclass(frozen=True)
class DropConfig:
    depth_offset: float = 3.0
    hover_scale: float = 1.1
    placement_surface: str = "Ground"
    required_parts: tuple = ("Base", "icing")
