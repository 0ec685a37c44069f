# =============================================================================
# Account Setup View Model
# =============================================================================
# The step state machine of the wizard. See setup/contract.py for the step
# order.
#
#   Event     | not at boundary         | at boundary
#   ----------+-------------------------+------------------------------
#   ON_NEXT   | advance one step        | stay on OPTIONS, NAVIGATE_NEXT
#   ON_BACK   | go back one step        | stay on AUTO_CONFIG, NAVIGATE_BACK
# =============================================================================

import logging

from mailsetup.ui.setup.contract import Effect, Event, SetupStep, State
from mailsetup.ui.viewmodel import BaseViewModel

logger = logging.getLogger(__name__)


class AccountSetupViewModel(BaseViewModel[State, Event, Effect]):
    """
    Holds the current wizard step and moves it forward/back.

    Usage:
        >>> view_model = AccountSetupViewModel()
        >>> view_model.event(Event.ON_NEXT)
        >>> view_model.current_state.setup_step
        <SetupStep.INCOMING_CONFIG: 2>
    """

    def __init__(self, initial_state: State | None = None) -> None:
        """
        Args:
            initial_state: Where to start. Defaults to the first step.
        """
        super().__init__(initial_state or State())

    def handle_event(self, event: Event) -> None:
        if event is Event.ON_NEXT:
            self._on_next()
        elif event is Event.ON_BACK:
            self._on_back()

    def _on_next(self) -> None:
        step = self.current_state.setup_step
        next_step = step.next_step
        if next_step is None:
            logger.debug("Wizard finished")
            self.emit_effect(Effect.NAVIGATE_NEXT)
            return

        logger.debug(f"Setup step {step.name} -> {next_step.name}")
        self.update_state(lambda state: State(setup_step=next_step))

    def _on_back(self) -> None:
        step = self.current_state.setup_step
        previous_step = step.previous_step
        if previous_step is None:
            logger.debug("Wizard left through the first step")
            self.emit_effect(Effect.NAVIGATE_BACK)
            return

        logger.debug(f"Setup step {step.name} -> {previous_step.name}")
        self.update_state(lambda state: State(setup_step=previous_step))

    def rewind_to(self, step: SetupStep) -> None:
        """
        Go back until the wizard shows the given step.

        Sends one ON_BACK per step to undo, so it works from inside an
        effect observer too (the events are then queued). Does nothing if
        the wizard is already at or before the step.
        """
        steps = list(SetupStep)
        distance = steps.index(self.current_state.setup_step) - steps.index(step)
        for _ in range(distance):
            self.event(Event.ON_BACK)
