# =============================================================================
# Connection Security
# =============================================================================
# How a mail client talks to its servers:
#   - NONE:     plain text (only sensible on a trusted network)
#   - STARTTLS: connect in plain text, then upgrade with STARTTLS
#   - TLS:      TLS from the first byte ("SSL" in older clients)
#
# Each protocol has a well-known default port per security mode. The setup
# forms reset the port field to this default whenever the user switches
# security, since a port that fits one mode rarely fits another.
# =============================================================================

from enum import Enum


class ConnectionSecurity(Enum):
    """Transport security for an IMAP or SMTP connection."""
    NONE = "none"
    STARTTLS = "starttls"
    TLS = "tls"

    @classmethod
    def from_name(cls, name: str) -> "ConnectionSecurity":
        """
        Look up a security mode by its config-file name (case-insensitive).

        Raises:
            ValueError: If the name is not one of none/starttls/tls.
        """
        return cls(name.strip().lower())


class MailProtocol(Enum):
    """Server protocols configured by the setup wizard."""
    IMAP = "imap"
    SMTP = "smtp"


# Default port per (protocol, security)
# IMAP: 143 for plain/STARTTLS, 993 for implicit TLS (RFC 8314)
# SMTP: 587 submission for plain/STARTTLS, 465 for implicit TLS (RFC 8314)
_DEFAULT_PORTS: dict[MailProtocol, dict[ConnectionSecurity, int]] = {
    MailProtocol.IMAP: {
        ConnectionSecurity.NONE: 143,
        ConnectionSecurity.STARTTLS: 143,
        ConnectionSecurity.TLS: 993,
    },
    MailProtocol.SMTP: {
        ConnectionSecurity.NONE: 587,
        ConnectionSecurity.STARTTLS: 587,
        ConnectionSecurity.TLS: 465,
    },
}


def default_port(protocol: MailProtocol, security: ConnectionSecurity) -> int:
    """Returns the conventional port for a protocol in a security mode."""
    return _DEFAULT_PORTS[protocol][security]
