from mailsetup.ui.serverconfig.contract import (
    PasswordChanged,
    PortChanged,
    SecurityChanged,
    ServerChanged,
    State,
    UsernameChanged,
    Validator,
)
from mailsetup.ui.serverconfig.viewmodel import ServerConfigViewModel

__all__ = [
    "PasswordChanged",
    "PortChanged",
    "SecurityChanged",
    "ServerChanged",
    "ServerConfigViewModel",
    "State",
    "UsernameChanged",
    "Validator",
]
