import argparse
import logging

from dropmatch.entities import DropConfig
from dropmatch.events import CandidateChanged, DragAborted, DropCommitted, FrontEndDeactivated, ItemSpawned
from dropmatch.frame_driver import FrameDriver
from dropmatch.front_end import PointerEvent
from dropmatch.listener import DragListener
from dropmatch.presets import build_bakery_scene

HELP = """commands:
  press X Y | move X Y | release X Y   polled palette pointer (one frame each)
  begin X Y | drag X Y | end X Y       tray drag events
  show | help | quit"""


class CommandLineInterface(DragListener):

    def __init__(self, config: DropConfig = DropConfig()):
        self.scene = build_bakery_scene(config, listener=self)
        self.driver = FrameDriver(None, self.scene.pointer)
        for fe in self.scene.polling:
            self.driver.register(fe)

    def on_event(self, event):
        if isinstance(event, ItemSpawned):
            print(f"spawned item {event.item.id} ({event.item.template_name}) from {event.source}")
        elif isinstance(event, CandidateChanged):
            name = event.current.name if event.current is not None else "nothing"
            print(f"item {event.item.id} is over {name}")
        elif isinstance(event, DropCommitted):
            if event.outcome.matched:
                print(f"item {event.item.id} matched {event.outcome.target.name}")
            else:
                print(f"item {event.item.id} dropped, no match")
        elif isinstance(event, DragAborted):
            print(f"item {event.item.id} aborted")
        elif isinstance(event, FrontEndDeactivated):
            print(f"{event.source} is used up")

    def printAll(self):
        for target in self.scene.world.targets:
            colors = [part.renderer.primary.name for part in target.parts if part.renderer is not None and part.renderer.primary]
            print(f"{target.name:<14} scale={target.scale:.2f} parts={','.join(colors)}")
        for item in self.scene.world.items:
            p = item.position
            candidate = item.candidate.name if item.candidate is not None else "-"
            print(f"item {item.id} ({item.template_name}) at ({p.x:.2f}, {p.y:.2f}, {p.z:.2f}) over {candidate}")
        for fe in self.scene.polling:
            r = fe.region
            state = "active" if fe.active else "used"
            print(f"{fe.name:<32} [{r.x:.0f},{r.y:.0f} {r.w:.0f}x{r.h:.0f}] {state}")
        for fe in self.scene.event_driven:
            r = fe.region
            print(f"{fe.name:<32} [{r.x:.0f},{r.y:.0f} {r.w:.0f}x{r.h:.0f}]")

    def execute(self, command: str) -> bool:
        """Runs one command line. Returns False once the user asks to quit."""
        words = command.split()
        if not words:
            return True
        verb = words[0]
        if verb == "quit":
            return False
        if verb == "show":
            self.printAll()
            return True
        if verb == "help":
            print(HELP)
            return True
        try:
            x, y = float(words[1]), float(words[2])
        except (IndexError, ValueError):
            print("Invalid coordinates!")
            return True

        pointer = self.scene.pointer
        if verb == "press":
            pointer.press(x, y)
            self.driver.run_frame()
        elif verb == "move":
            pointer.move(x, y)
            self.driver.run_frame()
        elif verb == "release":
            pointer.release(x, y)
            self.driver.run_frame()
        elif verb in ("begin", "drag", "end"):
            self.dispatch_tray(verb, PointerEvent(x, y))
        else:
            print("Invalid command!")
        return True

    def dispatch_tray(self, verb, event):
        for fe in self.scene.event_driven:
            if verb == "begin":
                if fe.on_begin_drag(event):
                    return
            elif verb == "drag":
                fe.on_drag(event)
            else:
                fe.on_end_drag(event)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Drive the bakery drag-and-drop scene from the terminal.")
    parser.add_argument("--depth", type=float, default=DropConfig.depth_offset)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    interface = CommandLineInterface(DropConfig(depth_offset=args.depth))
    print(HELP)
    interface.printAll()
    while True:
        try:
            command = input("> ")
        except EOFError:
            break
        if not interface.execute(command):
            break


if __name__ == "__main__":
    main()
