# =============================================================================
# Account Draft
# =============================================================================
# The result of a completed setup wizard: everything the user entered across
# the four steps, gathered into one record.
#
# This is a plain value. Nothing here connects to a server or writes the
# account anywhere; whoever runs the wizard decides what to do with it.
# =============================================================================

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mailsetup.core.security import ConnectionSecurity

if TYPE_CHECKING:
    from mailsetup.ui.autoconfig.contract import State as AutoConfigState
    from mailsetup.ui.options.contract import State as OptionsState
    from mailsetup.ui.serverconfig.contract import State as ServerConfigState


@dataclass(frozen=True)
class AccountDraft:
    """
    An email account as configured by the setup wizard.

    Attributes:
        email: The account's email address.
        display_name: Name shown in the "From" field.
        account_name: Label for the account in the client.
                      Falls back to the email address when left empty.
        email_signature: Text appended to outgoing messages (may be empty).

        imap_host: Hostname of the incoming (IMAP) server.
        imap_port: Port of the incoming server.
        imap_security: Transport security for the incoming server.
        imap_username: Login name for the incoming server.

        smtp_host: Hostname of the outgoing (SMTP) server.
        smtp_port: Port of the outgoing server.
        smtp_security: Transport security for the outgoing server.
        smtp_username: Login name for the outgoing server.

        imap_password / smtp_password: Kept out of repr() so drafts can be
        logged safely.
    """

    # Identity
    email: str
    display_name: str = ""
    account_name: str = ""
    email_signature: str = ""

    # Incoming server
    imap_host: str = ""
    imap_port: int = 993
    imap_security: ConnectionSecurity = ConnectionSecurity.TLS
    imap_username: str = ""
    imap_password: str = field(default="", repr=False)

    # Outgoing server
    smtp_host: str = ""
    smtp_port: int = 465
    smtp_security: ConnectionSecurity = ConnectionSecurity.TLS
    smtp_username: str = ""
    smtp_password: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        # Frozen, so the fallback goes through object.__setattr__
        if not self.account_name:
            object.__setattr__(self, "account_name", self.email)

    @classmethod
    def from_states(
        cls,
        auto_config: "AutoConfigState",
        incoming: "ServerConfigState",
        outgoing: "ServerConfigState",
        options: "OptionsState",
    ) -> "AccountDraft":
        """
        Build a draft from the final state of each wizard step.

        Ports that were never filled in (None) keep the draft's defaults.
        """
        extra: dict[str, int] = {}
        if incoming.port.value is not None:
            extra["imap_port"] = incoming.port.value
        if outgoing.port.value is not None:
            extra["smtp_port"] = outgoing.port.value

        return cls(
            email=auto_config.email_address.value.strip(),
            display_name=options.display_name.value.strip(),
            account_name=options.account_name.value.strip(),
            email_signature=options.email_signature.value,
            imap_host=incoming.server.value.strip(),
            imap_security=incoming.security,
            imap_username=incoming.username.value,
            imap_password=incoming.password.value,
            smtp_host=outgoing.server.value.strip(),
            smtp_security=outgoing.security,
            smtp_username=outgoing.username.value,
            smtp_password=outgoing.password.value,
            **extra,
        )

    def __str__(self) -> str:
        """Human-readable representation showing account name and email."""
        return f"{self.account_name} <{self.email}>"
