from mailsetup.ui.setup.contract import Effect, Event, SetupStep, State
from mailsetup.ui.setup.viewmodel import AccountSetupViewModel

__all__ = ["AccountSetupViewModel", "Effect", "Event", "SetupStep", "State"]
