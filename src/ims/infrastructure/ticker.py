"""Thread-based Ticker for the change notifier."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ims.application.change_notifier import Ticker

logger = logging.getLogger(__name__)


class ThreadingTicker(Ticker):
    """Runs each schedule on its own daemon thread.

    Stopping sets an event the thread is waiting on, so the thread exits
    at once instead of sleeping out the rest of the interval.
    """

    def schedule(
        self, interval: float, action: Callable[[], None]
    ) -> Callable[[], None]:
        stopped = threading.Event()

        def run() -> None:
            while not stopped.wait(interval):
                try:
                    action()
                except Exception:
                    logger.exception("Change notifier callback failed")

        thread = threading.Thread(target=run, name="ims-ticker", daemon=True)
        thread.start()
        return stopped.set
