# =============================================================================
# Account Options View Model
# =============================================================================

import logging
from dataclasses import replace

from mailsetup.ui.form import FormViewModel
from mailsetup.ui.options.contract import (
    AccountNameChanged,
    DisplayNameChanged,
    EmailSignatureChanged,
    State,
    Validator,
)
from mailsetup.ui.options.validator import AccountOptionsValidator

logger = logging.getLogger(__name__)


class AccountOptionsViewModel(FormViewModel[State]):
    """Form logic for the account options step."""

    def __init__(
        self,
        validator: Validator | None = None,
        initial_state: State | None = None,
    ) -> None:
        self.validator = validator or AccountOptionsValidator()
        super().__init__(initial_state or State())

    def reduce(self, state: State, event: object) -> State:
        if isinstance(event, AccountNameChanged):
            return replace(
                state,
                account_name=state.account_name.update_value(event.account_name),
            )
        elif isinstance(event, DisplayNameChanged):
            return replace(
                state,
                display_name=state.display_name.update_value(event.display_name),
            )
        elif isinstance(event, EmailSignatureChanged):
            return replace(
                state,
                email_signature=state.email_signature.update_value(event.email_signature),
            )

        logger.warning(f"Unhandled options event: {event!r}")
        return state

    def validate(self, state: State) -> State:
        return replace(
            state,
            account_name=state.account_name.update_from_validation_result(
                self.validator.validate_account_name(state.account_name.value)
            ),
            display_name=state.display_name.update_from_validation_result(
                self.validator.validate_display_name(state.display_name.value)
            ),
            email_signature=state.email_signature.update_from_validation_result(
                self.validator.validate_email_signature(state.email_signature.value)
            ),
        )
