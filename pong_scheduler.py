"""
Per-frame callback scheduling for the game loop.

The host loop calls FrameScheduler.run_pending() once per display frame. A
callback requested while the scheduler is running lands in the next frame,
so a tick that reschedules itself runs exactly once per frame.
"""


class TickHandle:
    def __init__(self, callback):
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self):
        return not (self.cancelled or self.fired)

    def cancel(self):
        # Cancelling twice, or after the callback ran, does nothing
        self.cancelled = True


class FrameScheduler:
    def __init__(self):
        self._queue = []

    def request(self, callback):
        handle = TickHandle(callback)
        self._queue.append(handle)
        return handle

    def pending(self):
        return sum(1 for h in self._queue if h.active)

    def run_pending(self):
        due, self._queue = self._queue, []
        ran = 0
        for handle in due:
            if not handle.active:
                continue
            handle.fired = True
            handle.callback()
            ran += 1
        return ran
