# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for the application.
#
#   - AccountSetupScreen: the four-step wizard
# =============================================================================

from mailsetup.ui.screens.setup import AccountSetupScreen

__all__ = ["AccountSetupScreen"]
