# =============================================================================
# UI Module
# =============================================================================
# View models and the Textual screen for the setup wizard.
#
# Structure:
#   - flow.py / viewmodel.py: observable state + effect channels
#   - setup/:        the step state machine (which step is shown)
#   - autoconfig/, incoming/, outgoing/, options/: one form per step
#   - serverconfig/: what the incoming and outgoing steps share
#   - screens/:      Textual rendering
#
# Only screens/ imports Textual. Everything else is plain Python and can be
# driven from tests without a terminal.
# =============================================================================

from mailsetup.ui.flow import EffectChannel, StateFlow
from mailsetup.ui.viewmodel import BaseViewModel

__all__ = ["BaseViewModel", "EffectChannel", "StateFlow"]
