# =============================================================================
# Account Outgoing Config View Model
# =============================================================================

from mailsetup.core.security import ConnectionSecurity, MailProtocol
from mailsetup.ui.outgoing.validator import AccountOutgoingConfigValidator
from mailsetup.ui.serverconfig import ServerConfigViewModel, State, Validator


class AccountOutgoingConfigViewModel(ServerConfigViewModel):
    """Form logic for the outgoing (SMTP) server step."""

    def __init__(
        self,
        validator: Validator | None = None,
        initial_state: State | None = None,
        default_security: ConnectionSecurity = ConnectionSecurity.TLS,
    ) -> None:
        super().__init__(
            protocol=MailProtocol.SMTP,
            validator=validator or AccountOutgoingConfigValidator(),
            initial_state=initial_state,
            default_security=default_security,
        )
