import logging
from tkinter import BOTH, Canvas, Tk

from PIL import ImageTk

from dropmatch.frame_driver import FrameDriver
from dropmatch.front_end import PointerEvent
from dropmatch.listener import DragListener
from dropmatch.presets import SWATCH_SIZE, build_bakery_scene
from tk_ui.adapter import SceneAdapter
from tk_ui.settings_store import build_drop_config, load_settings, log_level, save_settings
from tk_ui.swatch_face import SwatchRenderer
from tk_ui.ui_config import (
    FPS_MS,
    HOVER_OUTLINE_WIDTH,
    TARGET_OUTLINE_WIDTH,
    THEME_ORDER,
    THEMES,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

logger = logging.getLogger(__name__)


class TkSceneInterface(DragListener):
    def __init__(self, width=WINDOW_WIDTH, height=WINDOW_HEIGHT):
        self.width = width
        self.height = height
        self.root = None
        self.canvas = None
        self.driver = None

        self.settings = load_settings()
        self.theme_name = self.settings["theme_name"]
        self.message = "Drag a swatch onto the matching cake."
        self.needs_redraw = True
        self.swatch_renderer = SwatchRenderer()
        self.runtime_tk_images = []
        self.scene = None
        self.build_scene()

    @property
    def theme(self):
        return THEMES[self.theme_name]

    def build_scene(self):
        if self.scene is not None:
            for session in self.scene.sessions:
                session.abort()
        self.scene = build_bakery_scene(build_drop_config(self.settings), self.width, self.height, listener=self)
        if self.driver is not None:
            self.driver.pointer = self.scene.pointer
            self.driver.tickables = list(self.scene.polling)
        self.request_redraw()

    def run(self):
        self.root = Tk()
        self.root.title("Bakery drop")
        self.root.resizable(False, False)
        self.canvas = Canvas(self.root, width=self.width, height=self.height, highlightthickness=0, bd=0)
        self.canvas.pack(expand=1, fill=BOTH)

        self.root.bind("<Button-1>", self.on_press)
        self.root.bind("<B1-Motion>", self.on_drag)
        self.root.bind("<ButtonRelease-1>", self.on_release)
        self.root.bind("<Key>", self.on_key)
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

        self.driver = FrameDriver(self.root, self.scene.pointer, FPS_MS)
        for fe in self.scene.polling:
            self.driver.register(fe)
        self.driver.after_frame.append(self.redraw_if_needed)
        self.driver.start()
        self.root.mainloop()

    def on_event(self, event):
        text = SceneAdapter.event_to_message(event)
        if text is not None:
            self.message = text
        self.notify_redraw()

    def notify_redraw(self):
        self.request_redraw()

    def request_redraw(self):
        self.needs_redraw = True

    def on_press(self, event):
        self.scene.pointer.press(event.x, event.y)
        pointer_event = PointerEvent(event.x, event.y)
        for fe in self.scene.event_driven:
            if fe.on_begin_drag(pointer_event):
                break

    def on_drag(self, event):
        self.scene.pointer.move(event.x, event.y)
        pointer_event = PointerEvent(event.x, event.y)
        for fe in self.scene.event_driven:
            fe.on_drag(pointer_event)

    def on_release(self, event):
        self.scene.pointer.release(event.x, event.y)
        pointer_event = PointerEvent(event.x, event.y)
        for fe in self.scene.event_driven:
            fe.on_end_drag(pointer_event)

    def on_key(self, event):
        key = event.keysym.lower()
        if key == "escape":
            for session in self.scene.sessions:
                session.abort()
        elif key == "r":
            self.build_scene()
            self.message = "Cakes reset."
        elif key == "t":
            idx = THEME_ORDER.index(self.theme_name)
            self.theme_name = THEME_ORDER[(idx + 1) % len(THEME_ORDER)]
            self.settings["theme_name"] = self.theme_name
            save_settings(self.settings)
        self.request_redraw()

    def on_close(self):
        # A gesture cut short by closing the window still has to destroy its item.
        for session in self.scene.sessions:
            session.abort()
        if self.driver is not None:
            self.driver.stop()
        self.root.destroy()

    def redraw_if_needed(self):
        if self.needs_redraw:
            self.draw()
            self.needs_redraw = False

    def draw(self):
        if self.canvas is None:
            return
        c = self.canvas
        c.delete("all")
        self.runtime_tk_images = []
        vm = SceneAdapter.snapshot(self.scene)
        self.draw_background(c)
        for slot in vm.slots:
            self.draw_slot(c, slot)
        for control in vm.controls:
            self.draw_control(c, control)
        for item in vm.items:
            self.draw_item(c, item)
        theme = self.theme
        c.create_text(16, 20, anchor="nw", text="Bakery drop", fill=theme["hud_text"], font="Helvetica 18 bold")
        c.create_text(16, self.height - 20, anchor="sw", text=self.message, fill=theme["hud_subtext"], font="Helvetica 12")
        c.create_text(
            self.width - 16,
            self.height - 20,
            anchor="se",
            text="Esc: cancel  R: reset  T: theme",
            fill=theme["hud_subtext"],
            font="Helvetica 11",
        )

    def draw_background(self, c):
        theme = self.theme
        c.create_rectangle(0, 0, self.width, self.height, fill=theme["bg_base"], width=0)
        horizon = self.scene.camera.world_to_screen(self.scene.world.targets[0].position)
        floor_top = horizon[1] - 60 if horizon is not None else self.height * 0.5
        c.create_rectangle(0, floor_top, self.width, self.height, fill=theme["bg_floor"], width=0)

    @staticmethod
    def _fill(parts, name):
        for part in parts:
            if part.name == name:
                return part.color or ""
        return ""

    def draw_cake(self, c, x, y, r, parts, outline, width):
        base_h = r * 0.7
        c.create_rectangle(x - r, y - base_h * 0.2, x + r, y + base_h, fill=self._fill(parts, "Base"), outline=outline, width=width)
        c.create_oval(x - r, y - r * 0.8, x + r, y + r * 0.4, fill=self._fill(parts, "icing"), outline=outline, width=width)

    def draw_slot(self, c, slot):
        if slot.screen is None:
            return
        theme = self.theme
        x, y = slot.screen
        outline = theme["slot_hover"] if slot.enlarged else theme["slot_outline"]
        width = HOVER_OUTLINE_WIDTH if slot.enlarged else TARGET_OUTLINE_WIDTH
        c.create_oval(x - slot.radius * 1.2, y + slot.radius * 0.5, x + slot.radius * 1.2, y + slot.radius, fill=theme["shadow"], width=0)
        self.draw_cake(c, x, y, slot.radius, slot.parts, outline, width)
        c.create_text(x, y + slot.radius + 14, text=slot.category, fill=theme["hud_subtext"], font="Helvetica 10")

    def draw_item(self, c, item):
        if item.screen is None:
            return
        x, y = item.screen
        self.draw_cake(c, x, y, item.radius, item.parts, self.theme["panel_outline"], 1)

    def draw_control(self, c, control):
        theme = self.theme
        x1, y1, x2, y2 = control.rect
        background = theme["panel_fill"] if control.active else theme["swatch_used"]
        img = self.swatch_renderer.render(control.parts, SWATCH_SIZE, background, used=not control.active)
        tk_img = ImageTk.PhotoImage(img)
        self.runtime_tk_images.append(tk_img)
        c.create_image(x1, y1, anchor="nw", image=tk_img)
        c.create_rectangle(x1, y1, x2, y2, outline=theme["panel_outline"], width=1)
        c.create_text((x1 + x2) / 2, y2 + 8, text=control.template_name, fill=theme["hud_subtext"], font="Helvetica 9")


def main():
    settings = load_settings()
    logging.basicConfig(level=log_level(settings), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("starting bakery scene")
    TkSceneInterface().run()


if __name__ == "__main__":
    main()
