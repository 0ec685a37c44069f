# =============================================================================
# mailsetup: Email Account Setup Wizard
# =============================================================================
#
# A terminal wizard that walks a user through setting up an email account:
#
#   1. Email address and password
#   2. Incoming (IMAP) server
#   3. Outgoing (SMTP) server
#   4. Account options (name, display name, signature)
#
# Every form field is an immutable InputField validated by a small use case;
# the steps themselves are driven by a linear state machine.
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "mailsetup"

# Main entry point - this is what gets called by the 'mailsetup' command
from mailsetup.app import main

__all__ = ["main", "__version__", "__app_name__"]
