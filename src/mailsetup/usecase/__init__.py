# =============================================================================
# Validation Use Cases
# =============================================================================
# One single-purpose validator per form field. Every use case exposes
# execute(input) -> ValidationResult and owns a closed Enum of its errors.
#
# The per-step validators in mailsetup.ui.* combine these; they never add
# rules of their own.
# =============================================================================

from mailsetup.usecase.validate_account_name import ValidateAccountName, ValidateAccountNameError
from mailsetup.usecase.validate_display_name import ValidateDisplayName, ValidateDisplayNameError
from mailsetup.usecase.validate_email_address import (
    ValidateEmailAddress,
    ValidateEmailAddressError,
)
from mailsetup.usecase.validate_email_signature import (
    ValidateEmailSignature,
    ValidateEmailSignatureError,
)
from mailsetup.usecase.validate_password import ValidatePassword, ValidatePasswordError
from mailsetup.usecase.validate_port import ValidatePort, ValidatePortError
from mailsetup.usecase.validate_server import ValidateServer, ValidateServerError
from mailsetup.usecase.validate_username import ValidateUsername, ValidateUsernameError

__all__ = [
    "ValidateAccountName",
    "ValidateAccountNameError",
    "ValidateDisplayName",
    "ValidateDisplayNameError",
    "ValidateEmailAddress",
    "ValidateEmailAddressError",
    "ValidateEmailSignature",
    "ValidateEmailSignatureError",
    "ValidatePassword",
    "ValidatePasswordError",
    "ValidatePort",
    "ValidatePortError",
    "ValidateServer",
    "ValidateServerError",
    "ValidateUsername",
    "ValidateUsernameError",
]
