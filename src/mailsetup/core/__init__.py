# =============================================================================
# mailsetup Core Module
# =============================================================================
# Domain types shared by the whole wizard. Pure Python, no UI imports:
#   - Validation vocabulary (ValidationError, ValidationResult)
#   - InputField and its text/number variants
#   - ConnectionSecurity and default ports
#   - AccountDraft, the wizard's end product
# =============================================================================

from mailsetup.core.account import AccountDraft
from mailsetup.core.input import InputField, NumberInputField, StringInputField
from mailsetup.core.security import ConnectionSecurity, MailProtocol, default_port
from mailsetup.core.validation import (
    SUCCESS,
    Failure,
    Success,
    ValidationError,
    ValidationResult,
    ValidationUseCase,
)

__all__ = [
    "AccountDraft",
    "ConnectionSecurity",
    "Failure",
    "InputField",
    "MailProtocol",
    "NumberInputField",
    "StringInputField",
    "SUCCESS",
    "Success",
    "ValidationError",
    "ValidationResult",
    "ValidationUseCase",
    "default_port",
]
