# =============================================================================
# Account Auto Config View Model
# =============================================================================

import logging
from dataclasses import replace

from mailsetup.ui.autoconfig.contract import EmailAddressChanged, PasswordChanged, State, Validator
from mailsetup.ui.autoconfig.validator import AccountAutoConfigValidator
from mailsetup.ui.form import FormViewModel

logger = logging.getLogger(__name__)


class AccountAutoConfigViewModel(FormViewModel[State]):
    """Form logic for the email address / password step."""

    def __init__(
        self,
        validator: Validator | None = None,
        initial_state: State | None = None,
    ) -> None:
        self.validator = validator or AccountAutoConfigValidator()
        super().__init__(initial_state or State())

    def reduce(self, state: State, event: object) -> State:
        if isinstance(event, EmailAddressChanged):
            return replace(
                state,
                email_address=state.email_address.update_value(event.email_address),
            )
        elif isinstance(event, PasswordChanged):
            return replace(state, password=state.password.update_value(event.password))

        logger.warning(f"Unhandled auto config event: {event!r}")
        return state

    def validate(self, state: State) -> State:
        return replace(
            state,
            email_address=state.email_address.update_from_validation_result(
                self.validator.validate_email_address(state.email_address.value)
            ),
            password=state.password.update_from_validation_result(
                self.validator.validate_password(state.password.value)
            ),
        )
