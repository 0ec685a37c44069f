from mailsetup.ui.options.contract import (
    AccountNameChanged,
    DisplayNameChanged,
    EmailSignatureChanged,
    State,
)
from mailsetup.ui.options.validator import AccountOptionsValidator
from mailsetup.ui.options.viewmodel import AccountOptionsViewModel

__all__ = [
    "AccountNameChanged",
    "AccountOptionsValidator",
    "AccountOptionsViewModel",
    "DisplayNameChanged",
    "EmailSignatureChanged",
    "State",
]
