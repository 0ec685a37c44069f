# =============================================================================
# Account Draft Tests
# =============================================================================

from mailsetup.core import AccountDraft, ConnectionSecurity, NumberInputField, StringInputField
from mailsetup.core.security import MailProtocol, default_port
from mailsetup.ui import autoconfig, options, serverconfig


def make_states(display_name="Jane Doe", account_name="", incoming_port=993):
    auto_config = autoconfig.State(
        email_address=StringInputField(value=" jane@example.com "),
        password=StringInputField(value="secret"),
    )
    incoming = serverconfig.State(
        server=StringInputField(value="imap.example.com"),
        security=ConnectionSecurity.TLS,
        port=NumberInputField(value=incoming_port),
        username=StringInputField(value="jane"),
        password=StringInputField(value="imap-secret"),
    )
    outgoing = serverconfig.State(
        server=StringInputField(value="smtp.example.com"),
        security=ConnectionSecurity.STARTTLS,
        port=NumberInputField(value=587),
        username=StringInputField(value="jane"),
        password=StringInputField(value="smtp-secret"),
    )
    opts = options.State(
        account_name=StringInputField(value=account_name),
        display_name=StringInputField(value=display_name),
        email_signature=StringInputField(value="-- \nJane"),
    )
    return auto_config, incoming, outgoing, opts


def test_from_states():
    draft = AccountDraft.from_states(*make_states())

    assert draft.email == "jane@example.com"
    assert draft.display_name == "Jane Doe"
    assert draft.imap_host == "imap.example.com"
    assert draft.imap_port == 993
    assert draft.imap_security is ConnectionSecurity.TLS
    assert draft.smtp_host == "smtp.example.com"
    assert draft.smtp_port == 587
    assert draft.smtp_security is ConnectionSecurity.STARTTLS
    assert draft.smtp_password == "smtp-secret"
    assert draft.email_signature == "-- \nJane"


def test_account_name_falls_back_to_email():
    draft = AccountDraft.from_states(*make_states(display_name="", account_name=""))

    assert draft.display_name == ""
    assert draft.account_name == "jane@example.com"
    assert str(draft) == "jane@example.com <jane@example.com>"


def test_missing_port_keeps_default():
    draft = AccountDraft.from_states(*make_states(incoming_port=None))

    assert draft.imap_port == 993


def test_passwords_not_in_repr():
    draft = AccountDraft.from_states(*make_states())

    assert "secret" not in repr(draft)


def test_default_ports():
    assert default_port(MailProtocol.IMAP, ConnectionSecurity.TLS) == 993
    assert default_port(MailProtocol.IMAP, ConnectionSecurity.STARTTLS) == 143
    assert default_port(MailProtocol.SMTP, ConnectionSecurity.TLS) == 465
    assert default_port(MailProtocol.SMTP, ConnectionSecurity.NONE) == 587


def test_security_from_name():
    assert ConnectionSecurity.from_name(" StartTLS ") is ConnectionSecurity.STARTTLS
