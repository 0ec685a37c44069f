# =============================================================================
# Observable Channels
# =============================================================================
# Two small primitives the view models publish through:
#
#   StateFlow     - hot, replay-latest. A new subscriber immediately gets the
#                   current snapshot, then every later one, in order.
#   EffectChannel - one-shot effects. Each effect is delivered at most once
#                   to any observer and is never replayed to late subscribers.
#
# Everything is synchronous: emit()/send() return only after every observer
# has been called, so a snapshot is fully published before the caller moves
# on to the next event.
# =============================================================================

import logging
from collections import deque
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Observer = Callable[[T], None]
Unsubscribe = Callable[[], None]


class StateFlow(Generic[T]):
    """
    Holds the current value and notifies subscribers when it changes.

    Emitting a value equal to the current one is a no-op, so observers only
    ever see actual changes.

    Usage:
        >>> flow = StateFlow(0)
        >>> seen = []
        >>> unsubscribe = flow.subscribe(seen.append)
        >>> flow.emit(1)
        >>> seen
        [0, 1]
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._observers: list[Observer[T]] = []

    @property
    def value(self) -> T:
        """The current snapshot."""
        return self._value

    def subscribe(self, observer: Observer[T]) -> Unsubscribe:
        """
        Start observing.

        The observer is called with the current snapshot right away.

        Returns:
            A callable that removes the observer again.
        """
        self._observers.append(observer)
        observer(self._value)
        return lambda: self._remove(observer)

    def emit(self, value: T) -> None:
        """Publish a new snapshot to every subscriber."""
        if value == self._value:
            return
        self._value = value
        # Copy so observers may unsubscribe while being notified
        for observer in list(self._observers):
            observer(value)

    def _remove(self, observer: Observer[T]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)


class EffectChannel(Generic[T]):
    """
    Delivers one-shot effects.

    An effect goes to the observers attached when it is sent. If nobody is
    attached, it waits in a buffer and is handed to the next observer that
    subscribes, then dropped. Nothing is ever redelivered.
    """

    def __init__(self) -> None:
        self._observers: list[Observer[T]] = []
        self._pending: deque[T] = deque()

    def subscribe(self, observer: Observer[T]) -> Unsubscribe:
        """
        Start receiving effects.

        Effects sent while nobody was listening are flushed to this
        observer first, in the order they were sent.

        Returns:
            A callable that removes the observer again.
        """
        self._observers.append(observer)
        while self._pending:
            observer(self._pending.popleft())
        return lambda: self._remove(observer)

    def send(self, effect: T) -> None:
        """Deliver an effect to the current observers, or hold it for the next one."""
        if not self._observers:
            logger.debug(f"No observer for effect {effect!r}, holding it")
            self._pending.append(effect)
            return
        for observer in list(self._observers):
            observer(effect)

    def _remove(self, observer: Observer[T]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
