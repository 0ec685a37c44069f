# =============================================================================
# Server Config View Model
# =============================================================================

import logging
from dataclasses import replace

from mailsetup.core.security import ConnectionSecurity, MailProtocol, default_port
from mailsetup.ui.form import FormViewModel
from mailsetup.ui.serverconfig.contract import (
    PasswordChanged,
    PortChanged,
    SecurityChanged,
    ServerChanged,
    State,
    UsernameChanged,
    Validator,
)

logger = logging.getLogger(__name__)


class ServerConfigViewModel(FormViewModel[State]):
    """
    Form logic for one mail server.

    Switching security replaces the port with the protocol's default port
    for the new mode (e.g. IMAP + TLS -> 993).

    Attributes:
        protocol: Which server this form configures.
    """

    def __init__(
        self,
        protocol: MailProtocol,
        validator: Validator,
        initial_state: State | None = None,
        default_security: ConnectionSecurity = ConnectionSecurity.TLS,
    ) -> None:
        """
        Args:
            protocol: IMAP or SMTP; decides the default ports.
            validator: Validates the individual fields.
            initial_state: Starting form. Defaults to an empty form with the
                           default port for default_security.
            default_security: Security preselected in the default form.
        """
        self.protocol = protocol
        self.validator = validator
        super().__init__(initial_state or State.for_protocol(protocol, default_security))

    def reduce(self, state: State, event: object) -> State:
        if isinstance(event, ServerChanged):
            return replace(state, server=state.server.update_value(event.server))
        elif isinstance(event, SecurityChanged):
            port = default_port(self.protocol, event.security)
            logger.debug(f"{self.protocol.name} security {event.security.name}, port {port}")
            return replace(
                state,
                security=event.security,
                port=state.port.update_value(port),
            )
        elif isinstance(event, PortChanged):
            return replace(state, port=state.port.update_value(event.port))
        elif isinstance(event, UsernameChanged):
            return replace(state, username=state.username.update_value(event.username))
        elif isinstance(event, PasswordChanged):
            return replace(state, password=state.password.update_value(event.password))

        logger.warning(f"Unhandled event for {self.protocol.name} config: {event!r}")
        return state

    def validate(self, state: State) -> State:
        return replace(
            state,
            server=state.server.update_from_validation_result(
                self.validator.validate_server(state.server.value)
            ),
            port=state.port.update_from_validation_result(
                self.validator.validate_port(state.port.value)
            ),
            username=state.username.update_from_validation_result(
                self.validator.validate_username(state.username.value)
            ),
            password=state.password.update_from_validation_result(
                self.validator.validate_password(state.password.value)
            ),
        )
