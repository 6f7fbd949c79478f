"""Change notification for state containers driving a presentation layer."""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Observable(Generic[T]):
    """
    Mixin giving a state container a subscribe/notify contract.

    Subscribers receive a snapshot of the new state after each mutation.
    A failing subscriber is logged and does not affect the mutation or the
    other subscribers.
    """

    def __init__(self) -> None:
        self._callbacks: list[Callable[[T], None]] = []

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """
        Register a change callback.

        Args:
            callback: Called with the state snapshot after every mutation.

        Returns:
            Function that removes the callback when called.
        """
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def _notify(self, snapshot: T) -> None:
        for callback in list(self._callbacks):
            try:
                callback(snapshot)
            except Exception as e:
                logger.error(f"Change callback {callback!r} failed: {e}")
