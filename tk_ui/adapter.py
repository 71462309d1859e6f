from dropmatch.events import CandidateChanged, DragAborted, DropCommitted, FrontEndDeactivated, ItemMoved, ItemSpawned
from dropmatch.presets import BakeryScene
from tk_ui.ui_config import PIXELS_PER_UNIT, REFERENCE_DEPTH
from tk_ui.view_model import ControlView, ItemView, PartView, SceneViewModel, SlotView


def _part_views(parts):
    views = []
    for part in parts:
        primary = part.renderer.primary if part.renderer is not None else None
        views.append(PartView(name=part.name, color=primary.color if primary is not None else None))
    return tuple(views)


def _template_part_views(template):
    return tuple(
        PartView(name=name, color=materials[0].color if materials else None)
        for name, materials in template.appearances
    )


class SceneAdapter:
    """Bridges the live drag world to a renderer-friendly model."""

    @staticmethod
    def _screen_radius(camera, position, size):
        depth = camera.depth_of(position)
        if depth <= 0:
            return 0.0
        return PIXELS_PER_UNIT * max(size.x, size.z) * 0.5 * REFERENCE_DEPTH / depth

    @staticmethod
    def snapshot(scene: BakeryScene) -> SceneViewModel:
        camera = scene.camera
        slots = tuple(
            SlotView(
                name=target.name,
                category=target.category.value,
                screen=camera.world_to_screen(target.position),
                radius=SceneAdapter._screen_radius(camera, target.position, target.size) * target.scale,
                scale=target.scale,
                enlarged=target.enlarged,
                parts=_part_views(target.parts),
            )
            for target in scene.world.targets
        )
        items = tuple(
            ItemView(
                id=item.id,
                screen=camera.world_to_screen(item.position),
                radius=SceneAdapter._screen_radius(camera, item.position, item.size),
                candidate=item.candidate.name if item.candidate is not None else None,
                parts=_part_views(item.parts),
            )
            for item in scene.world.items
        )
        controls = []
        for fe in scene.polling + scene.event_driven:
            r = fe.region
            controls.append(
                ControlView(
                    name=fe.name,
                    rect=(r.x, r.y, r.x + r.w, r.y + r.h),
                    template_name=fe.template.name,
                    active=fe.active,
                    parts=_template_part_views(fe.template),
                )
            )
        return SceneViewModel(slots=slots, items=items, controls=tuple(controls))

    @staticmethod
    def event_to_message(event):
        if isinstance(event, ItemSpawned):
            return f"Dragging {event.item.template_name}..."
        if isinstance(event, ItemMoved):
            return None
        if isinstance(event, CandidateChanged):
            if event.current is None:
                return "No target under the item."
            return f"Release to decorate {event.current.name}."
        if isinstance(event, DropCommitted):
            if event.outcome.matched:
                return f"{event.item.template_name} applied to {event.outcome.target.name}."
            return f"{event.item.template_name} did not fit anywhere."
        if isinstance(event, DragAborted):
            return "Drag cancelled."
        if isinstance(event, FrontEndDeactivated):
            return f"{event.source.split(':', 1)[-1]} used up."
        return None
