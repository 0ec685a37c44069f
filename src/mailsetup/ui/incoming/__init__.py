from mailsetup.ui.incoming.validator import AccountIncomingConfigValidator
from mailsetup.ui.incoming.viewmodel import AccountIncomingConfigViewModel

__all__ = ["AccountIncomingConfigValidator", "AccountIncomingConfigViewModel"]
