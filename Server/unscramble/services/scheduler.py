"""
Deferred Callback Schedulers

One-shot timers used for the solved-word highlight. Both implementations
return a handle with cancel(); a cancelled callback never runs.
"""

import threading
from typing import Callable


class ScheduledCall:
    """Handle for a pending one-shot callback."""

    def __init__(self, callback: Callable[[], None]):
        self._callback = callback
        self._timer = None
        self._done = False
        self._lock = threading.Lock()

    @property
    def cancelled(self) -> bool:
        return self._done

    def attach_timer(self, timer: threading.Timer) -> None:
        """Timer to stop as well when the call is cancelled."""
        self._timer = timer

    def cancel(self) -> None:
        with self._lock:
            self._done = True
        if self._timer is not None:
            self._timer.cancel()

    def fire(self) -> None:
        with self._lock:
            if self._done:
                return
            self._done = True
        self._callback()


class ThreadingScheduler:
    """Runs callbacks on daemon threading.Timer threads."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(callback)
        timer = threading.Timer(delay_seconds, call.fire)
        timer.daemon = True
        call.attach_timer(timer)
        timer.start()
        return call


class SocketIOScheduler:
    """
    Runs callbacks as SocketIO background tasks.

    Uses the server's own async mode, so callbacks run on the same kind of
    worker (thread, eventlet or gevent green thread) as event handlers.
    """

    def __init__(self, socketio):
        self.socketio = socketio

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(callback)

        def run():
            self.socketio.sleep(delay_seconds)
            call.fire()

        self.socketio.start_background_task(run)
        return call
