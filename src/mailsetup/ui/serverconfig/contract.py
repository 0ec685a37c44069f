# =============================================================================
# Server Config Contract
# =============================================================================
# State and events shared by the incoming (IMAP) and outgoing (SMTP) server
# steps. The two steps ask for the same five things; only the protocol, and
# with it the default ports, differ.
# =============================================================================

from dataclasses import dataclass, field
from typing import Protocol

from mailsetup.core.input import NumberInputField, StringInputField
from mailsetup.core.security import ConnectionSecurity, MailProtocol, default_port
from mailsetup.core.validation import ValidationResult


@dataclass(frozen=True)
class State:
    """
    Form state of a server step.

    Attributes:
        server: Hostname of the server.
        security: Transport security. Not validated (always a valid choice).
        port: Server port.
        username: Login name.
        password: Login password.
    """
    server: StringInputField = field(default_factory=StringInputField)
    security: ConnectionSecurity = ConnectionSecurity.TLS
    port: NumberInputField = field(default_factory=NumberInputField)
    username: StringInputField = field(default_factory=StringInputField)
    password: StringInputField = field(default_factory=StringInputField)

    @classmethod
    def for_protocol(
        cls,
        protocol: MailProtocol,
        security: ConnectionSecurity = ConnectionSecurity.TLS,
    ) -> "State":
        """An empty form with the port pre-filled for the protocol and security."""
        return cls(
            security=security,
            port=NumberInputField(value=default_port(protocol, security)),
        )


# -----------------------------------------------------------------------------
# Events
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ServerChanged:
    server: str


@dataclass(frozen=True)
class SecurityChanged:
    security: ConnectionSecurity


@dataclass(frozen=True)
class PortChanged:
    port: int | None


@dataclass(frozen=True)
class UsernameChanged:
    username: str


@dataclass(frozen=True)
class PasswordChanged:
    password: str


class Validator(Protocol):
    """Per-field validation of a server step."""

    def validate_server(self, server: str) -> ValidationResult: ...

    def validate_port(self, port: int | None) -> ValidationResult: ...

    def validate_username(self, username: str) -> ValidationResult: ...

    def validate_password(self, password: str) -> ValidationResult: ...
