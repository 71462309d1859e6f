from dataclasses import dataclass, field

from dropmatch.camera import Camera
from dropmatch.entities import Appearance, Category, DropConfig, ItemTemplate, MeshRenderer, Part, Surface, TargetSlot
from dropmatch.front_end import EventDrivenFrontEnd, PointerState, PollingFrontEnd
from dropmatch.geometry import Box, Rect, Vec3
from dropmatch.listener import NULL_LISTENER
from dropmatch.positioning import CameraProjection, SurfaceRaycast
from dropmatch.resolver import DropResolver
from dropmatch.session import DragSession
from dropmatch.world import SceneWorld

SWATCH_SIZE = 72
SWATCH_GAP = 18
PALETTE_LEFT = 20
PALETTE_TOP = 90

PLAIN_SPONGE = Appearance("plain_sponge", "#f3e5ab")
PLAIN_CREAM = Appearance("plain_cream", "#fffdf5")

# (slot name, category, screen anchor ratio x, size)
TARGET_LAYOUT = (
    ("cupcake_stand", Category.CUPCAKE, 0.38, Vec3(0.6, 0.5, 0.6)),
    ("cake_board", Category.LAYER_CAKE, 0.58, Vec3(0.8, 0.7, 0.8)),
    ("donut_plate", Category.DONUT, 0.78, Vec3(0.6, 0.3, 0.6)),
)
TARGET_ANCHOR_Y = 0.62


def _template(name, category, size, base, icing):
    return ItemTemplate(
        name=name,
        category=category,
        size=size,
        appearances=(("Base", (base,)), ("icing", (icing,))),
    )


PALETTE_TEMPLATES = (
    _template(
        "Strawberry cupcake",
        Category.CUPCAKE,
        Vec3(0.5, 0.45, 0.5),
        Appearance("vanilla_sponge", "#f5deb3"),
        Appearance("strawberry_frosting", "#f472b6"),
    ),
    _template(
        "Chocolate layer cake",
        Category.LAYER_CAKE,
        Vec3(0.7, 0.6, 0.7),
        Appearance("cocoa_sponge", "#7c4a2d"),
        Appearance("ganache", "#3b2314"),
    ),
)

TRAY_TEMPLATES = (
    _template(
        "Glazed donut",
        Category.DONUT,
        Vec3(0.5, 0.25, 0.5),
        Appearance("fried_dough", "#d9a066"),
        Appearance("sugar_glaze", "#fef3c7"),
    ),
    _template(
        "Mint cupcake",
        Category.CUPCAKE,
        Vec3(0.5, 0.45, 0.5),
        Appearance("cocoa_sponge", "#7c4a2d"),
        Appearance("mint_frosting", "#6ee7b7"),
    ),
)


def swatch_rect(column_x, index) -> Rect:
    return Rect(column_x, PALETTE_TOP + index * (SWATCH_SIZE + SWATCH_GAP), SWATCH_SIZE, SWATCH_SIZE)


def plain_parts():
    return [Part("Base", MeshRenderer((PLAIN_SPONGE,))), Part("icing", MeshRenderer((PLAIN_CREAM,)))]


@dataclass
class BakeryScene:
    camera: Camera
    world: SceneWorld
    pointer: PointerState
    polling: list = field(default_factory=list)
    event_driven: list = field(default_factory=list)

    @property
    def sessions(self):
        return [fe.session for fe in self.polling + self.event_driven]

    def front_end_named(self, name):
        for fe in self.polling + self.event_driven:
            if fe.name == name:
                return fe
        return None


def build_bakery_scene(config: DropConfig = DropConfig(), width=1200, height=760, listener=NULL_LISTENER) -> BakeryScene:
    """
    Camera-projected palette items travel at ``config.depth_offset`` from the camera,
    so the slots are placed on that plane and the ground is laid under them.
    """
    camera = Camera(position=Vec3(0.0, 2.0, -5.0), pitch_deg=20.0, fov_deg=60.0, width=width, height=height)
    world = SceneWorld()
    floor_y = None
    for name, category, ratio_x, size in TARGET_LAYOUT:
        center = camera.screen_to_world(width * ratio_x, height * TARGET_ANCHOR_Y, config.depth_offset)
        world.add_target(TargetSlot(name=name, category=category, position=center, size=size, parts=plain_parts()))
        bottom = center.y - size.y / 2
        floor_y = bottom if floor_y is None else min(floor_y, bottom)
    world.add_surface(Surface("floor", config.placement_surface, Box(Vec3(0.0, floor_y - 0.5, 0.0), Vec3(50.0, 0.5, 50.0))))

    pointer = PointerState()
    resolver = DropResolver(world, config.required_parts)
    scene = BakeryScene(camera=camera, world=world, pointer=pointer)

    projection = CameraProjection(camera, config.depth_offset)
    for index, template in enumerate(PALETTE_TEMPLATES):
        name = f"palette:{template.name}"
        session = DragSession(world, resolver, projection, config.hover_scale, listener, source=name)
        scene.polling.append(PollingFrontEnd(name, swatch_rect(PALETTE_LEFT, index), template, session, pointer, listener))

    raycast = SurfaceRaycast(camera, world, config.placement_surface)
    tray_x = width - PALETTE_LEFT - SWATCH_SIZE
    for index, template in enumerate(TRAY_TEMPLATES):
        name = f"tray:{template.name}"
        session = DragSession(world, resolver, raycast, config.hover_scale, listener, source=name)
        scene.event_driven.append(EventDrivenFrontEnd(name, swatch_rect(tray_x, index), template, session))
    return scene
