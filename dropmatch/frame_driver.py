from dropmatch.front_end import PointerState

FPS_MS = 16


class FrameDriver:
    """
    Drives tickables from a host scheduler exposing ``after(ms, callback)``,
    e.g. a tkinter root.
    """

    def __init__(self, scheduler, pointer: PointerState, period_ms=FPS_MS):
        self.scheduler = scheduler
        self.pointer = pointer
        self.period_ms = period_ms
        self.tickables = []
        self.after_frame = []
        self.frame_count = 0
        self.running = False

    def register(self, tickable):
        self.tickables.append(tickable)

    def run_frame(self):
        for tickable in self.tickables:
            tickable.tick()
        for callback in self.after_frame:
            callback()
        self.pointer.end_frame()
        self.frame_count += 1

    def start(self):
        self.running = True
        self._loop()

    def stop(self):
        self.running = False

    def _loop(self):
        if not self.running:
            return
        self.run_frame()
        self.scheduler.after(self.period_ms, self._loop)
