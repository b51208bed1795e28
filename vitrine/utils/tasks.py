"""Run coroutines off the GTK main loop and hand results back."""
from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)

Dispatch = Callable[..., Any]


def call_now(func: Callable[..., Any], *args: Any) -> None:
    """Dispatch that invokes the callback immediately on the calling thread."""
    func(*args)


class BackgroundRunner:
    """Execute a coroutine in a worker thread with its own event loop.

    The result is handed to ``dispatch`` (``GLib.idle_add`` in the UI) so
    callbacks always run on the thread that owns the widgets.
    """

    def __init__(
        self,
        *,
        dispatch: Dispatch = call_now,
        thread_factory: Callable[[Callable[[], None]], threading.Thread] | None = None,
    ) -> None:
        self._dispatch = dispatch
        self._thread_factory = thread_factory

    def submit(
        self,
        make_coro: Callable[[], Awaitable[Any]],
        on_done: Callable[[Any], None],
        on_error: Callable[[Exception], None] | None = None,
    ) -> threading.Thread:
        """Run ``make_coro()`` on a worker thread.

        Exactly one of ``on_done``/``on_error`` is dispatched; a failure is
        logged even when no ``on_error`` is given.
        """
        def target() -> None:
            try:
                result = asyncio.run(make_coro())
            except Exception as exc:
                logger.exception("Background task failed")
                if on_error is not None:
                    self._dispatch(self._deliver, on_error, exc)
                return
            self._dispatch(self._deliver, on_done, result)

        thread = self._make_thread(target)
        thread.start()
        return thread

    @staticmethod
    def _deliver(on_done: Callable[[Any], None], result: Any) -> bool:
        on_done(result)
        return False

    def _make_thread(self, target: Callable[[], None]) -> threading.Thread:
        factory = self._thread_factory or self._default_thread_factory
        return factory(target)

    @staticmethod
    def _default_thread_factory(target: Callable[[], None]) -> threading.Thread:
        return threading.Thread(target=target, daemon=True)
