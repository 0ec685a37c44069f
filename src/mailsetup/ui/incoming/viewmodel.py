# =============================================================================
# Account Incoming Config View Model
# =============================================================================

from mailsetup.core.security import ConnectionSecurity, MailProtocol
from mailsetup.ui.incoming.validator import AccountIncomingConfigValidator
from mailsetup.ui.serverconfig import ServerConfigViewModel, State, Validator


class AccountIncomingConfigViewModel(ServerConfigViewModel):
    """Form logic for the incoming (IMAP) server step."""

    def __init__(
        self,
        validator: Validator | None = None,
        initial_state: State | None = None,
        default_security: ConnectionSecurity = ConnectionSecurity.TLS,
    ) -> None:
        super().__init__(
            protocol=MailProtocol.IMAP,
            validator=validator or AccountIncomingConfigValidator(),
            initial_state=initial_state,
            default_security=default_security,
        )
