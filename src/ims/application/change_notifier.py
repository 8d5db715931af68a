"""Best-effort "data may have changed" signal.

There is no push channel behind this: on every tick the notifier rolls a
die and, now and then, tells subscribers to go and re-fetch. Signals carry
no payload and are neither ordered nor guaranteed; subscribers must read
the current state through the handlers when they fire.
"""

from __future__ import annotations

import random
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable

DEFAULT_INTERVAL = 1.0
DEFAULT_PROBABILITY = 0.05


class Ticker(ABC):
    """Runs an action at a fixed interval until stopped."""

    @abstractmethod
    def schedule(
        self, interval: float, action: Callable[[], None]
    ) -> Callable[[], None]:
        """Start ticking and return a function that stops the ticks."""


class Subscription:
    """Handle returned by ``ChangeNotifier.subscribe``."""

    def __init__(self, stop: Callable[[], None]) -> None:
        self._stop = stop
        self._active = True
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop further ticks. Safe to call more than once."""
        with self._lock:
            if not self._active:
                return
            self._active = False
        self._stop()


class ChangeNotifier:

    def __init__(
        self,
        ticker: Ticker,
        interval: float = DEFAULT_INTERVAL,
        probability: float = DEFAULT_PROBABILITY,
        rng: random.Random | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        if not 0.0 <= probability <= 1.0:
            raise ValueError("Change probability must be between 0 and 1")
        self._ticker = ticker
        self._interval = interval
        self._probability = probability
        self._rng = rng or random.Random()

    def subscribe(self, callback: Callable[[], None]) -> Subscription:
        """Call *callback* on the ticks that signal a possible change."""
        subscription: Subscription | None = None

        def on_tick() -> None:
            if subscription is not None and not subscription.active:
                return
            if self._rng.random() < self._probability:
                callback()

        subscription = Subscription(self._ticker.schedule(self._interval, on_tick))
        return subscription
