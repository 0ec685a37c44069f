from mailsetup.ui.autoconfig.contract import EmailAddressChanged, PasswordChanged, State
from mailsetup.ui.autoconfig.validator import AccountAutoConfigValidator
from mailsetup.ui.autoconfig.viewmodel import AccountAutoConfigViewModel

__all__ = [
    "AccountAutoConfigValidator",
    "AccountAutoConfigViewModel",
    "EmailAddressChanged",
    "PasswordChanged",
    "State",
]
