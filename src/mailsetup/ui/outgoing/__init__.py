from mailsetup.ui.outgoing.validator import AccountOutgoingConfigValidator
from mailsetup.ui.outgoing.viewmodel import AccountOutgoingConfigViewModel

__all__ = ["AccountOutgoingConfigValidator", "AccountOutgoingConfigViewModel"]
