"""A thread-safe score keeper whose scores decay on each tick."""

from __future__ import annotations

import random
import threading
from typing import Callable, Generic, Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


class Scoring(Generic[T]):
    """Tracks a score for each of a set of items.

    Scores are changed through :meth:`decay_func` on every tick once
    :meth:`start` has been called. All methods are thread-safe.
    """

    def __init__(self, decay_func: Callable[[float], float]) -> None:
        self.decay_func = decay_func
        self._items: dict[T, float] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self, ticks: Iterable[object]) -> None:
        """Start decaying all scores once for each item taken from ``ticks``.

        ``ticks`` is consumed in a background thread until it is exhausted
        or :meth:`stop` is called. Raises RuntimeError if already started.
        """
        with self._lock:
            if self._thread is not None:
                raise RuntimeError("already started")
            self._thread = threading.Thread(
                target=self._decay_routine, args=(ticks,), daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        """Stop applying decay; ticks received afterwards are ignored."""
        self._stopped.set()

    def _decay_routine(self, ticks: Iterable[object]) -> None:
        for _ in ticks:
            if self._stopped.is_set():
                return
            self.decay()

    def add(self, score: float, *args: T) -> None:
        """Add each value with ``score``; values already present are left alone."""
        with self._lock:
            for value in args:
                self._items.setdefault(value, score)

    def remove(self, *args: T) -> None:
        """Remove the given values; missing values are ignored."""
        with self._lock:
            for value in args:
                self._items.pop(value, None)

    def get(self, value: T) -> float | None:
        """Return the score of ``value``, or None if it is not tracked."""
        with self._lock:
            return self._items.get(value)

    def sorted(self) -> list[T]:
        """Return the values by descending score; ties come in random order."""
        with self._lock:
            entries = list(self._items.items())
        entries.sort(key=lambda entry: (-entry[1], random.random()))
        return [value for value, _ in entries]

    def increase(self, value: T, score: float) -> None:
        """Add ``score`` to the score of ``value`` if it is tracked."""
        with self._lock:
            if value in self._items:
                self._items[value] += score

    def decrease(self, value: T, score: float) -> None:
        """Subtract ``score`` from the score of ``value`` if it is tracked."""
        with self._lock:
            if value in self._items:
                self._items[value] -= score

    def decay(self) -> None:
        """Apply the decay function to every score."""
        with self._lock:
            for value, score in self._items.items():
                self._items[value] = self.decay_func(score)