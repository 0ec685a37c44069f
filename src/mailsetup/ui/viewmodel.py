# =============================================================================
# Base View Model
# =============================================================================
# Every screen of the wizard follows the same contract:
#   - state:  a StateFlow of immutable State snapshots
#   - effect: an EffectChannel of one-shot Effects (navigation)
#   - event(): the only way in. The UI submits events; the view model turns
#     them into new state and/or effects.
#
# Events are handled one at a time. An event submitted from inside an
# observer (while another event is being handled) is queued and handled
# right after the current one finishes.
# =============================================================================

from collections import deque
from typing import Callable, Generic, TypeVar

from mailsetup.ui.flow import EffectChannel, StateFlow

S = TypeVar("S")
Ev = TypeVar("Ev")
Ef = TypeVar("Ef")


class BaseViewModel(Generic[S, Ev, Ef]):
    """
    State holder for one screen.

    Subclasses implement handle_event() and use update_state() /
    emit_effect() to publish results.

    Attributes:
        state: Observable state snapshots.
        effect: Observable one-shot effects.
    """

    def __init__(self, initial_state: S) -> None:
        self.state: StateFlow[S] = StateFlow(initial_state)
        self.effect: EffectChannel[Ef] = EffectChannel()
        self._queue: deque[Ev] = deque()
        self._handling = False

    @property
    def current_state(self) -> S:
        """Shortcut for state.value."""
        return self.state.value

    def event(self, event: Ev) -> None:
        """Submit an event from the UI."""
        self._queue.append(event)
        if self._handling:
            return

        self._handling = True
        try:
            while self._queue:
                self.handle_event(self._queue.popleft())
        except BaseException:
            # Events queued behind a failed one belong to the failed dispatch
            self._queue.clear()
            raise
        finally:
            self._handling = False

    def handle_event(self, event: Ev) -> None:
        """Process a single event. Implemented by subclasses."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Helpers for subclasses
    # -------------------------------------------------------------------------

    def update_state(self, update: Callable[[S], S]) -> S:
        """Derive the next snapshot from the current one and publish it."""
        new_state = update(self.state.value)
        self.state.emit(new_state)
        return new_state

    def emit_effect(self, effect: Ef) -> None:
        """Send a one-shot effect to the UI."""
        self.effect.send(effect)
