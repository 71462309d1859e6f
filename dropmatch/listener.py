from dropmatch.events import DragEvent


class DragListener:

    def on_event(self, event: DragEvent):
        """
        Invoked after the core changes drag state.
        :param event:
        :return:
        """
        self.notify_redraw()

    def notify_redraw(self):
        pass


NULL_LISTENER = DragListener()
