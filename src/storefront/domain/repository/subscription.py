"""Snapshot subscriptions.

A subscriber receives the *whole* current collection, never a diff.
Repositories hold one ``SnapshotListeners`` per collection and call
``publish()`` whenever the collection changes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

SnapshotCallback = Callable[[list[T]], None]
Unsubscribe = Callable[[], None]

logger = logging.getLogger(__name__)


class SnapshotListeners(Generic[T]):

    def __init__(self) -> None:
        self._callbacks: list[SnapshotCallback] = []

    def add(self, callback: SnapshotCallback, snapshot: list[T]) -> Unsubscribe:
        """Register *callback* and deliver the current *snapshot* to it."""
        self._callbacks.append(callback)
        callback(list(snapshot))

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def publish(self, snapshot: list[T]) -> None:
        if not self._callbacks:
            return
        logger.debug("Publishing snapshot of %d records to %d subscriber(s)",
                     len(snapshot), len(self._callbacks))
        for callback in list(self._callbacks):
            callback(list(snapshot))

    def __len__(self) -> int:
        return len(self._callbacks)
