"""
Error Banner

Single-slot transient message display. Showing a message replaces whatever is
on screen and restarts the visibility window; a pending hide from an earlier
message never hides a newer one.
"""

import threading
from typing import Callable, Optional

MessageCallback = Callable[[str], None]
HideCallback = Callable[[], None]


class ErrorBanner:
    """
    Args:
        duration: Seconds a message stays visible
        on_show: Called with the message text when it is shown
        on_hide: Called when the visible message expires
        timer_factory: ``threading.Timer`` compatible factory
    """

    def __init__(self,
                 duration: float = 2.0,
                 on_show: Optional[MessageCallback] = None,
                 on_hide: Optional[HideCallback] = None,
                 timer_factory=threading.Timer):
        self.duration = duration
        self.on_show = on_show
        self.on_hide = on_hide
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._generation = 0
        self.message: Optional[str] = None

    @property
    def visible(self) -> bool:
        return self.message is not None

    def show(self, message: str) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            self.message = message
            timer = self._timer_factory(self.duration, self._expire, args=(generation,))
            timer.daemon = True
            self._timer = timer

        if self.on_show:
            self.on_show(message)
        timer.start()

    def _expire(self, generation: int) -> None:
        with self._lock:
            # pre-empted by a newer message
            if generation != self._generation:
                return
            self.message = None
            self._timer = None

        if self.on_hide:
            self.on_hide()

    def clear(self) -> None:
        """Hide immediately and drop any pending expiry."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1
            was_visible = self.message is not None
            self.message = None

        if was_visible and self.on_hide:
            self.on_hide()
