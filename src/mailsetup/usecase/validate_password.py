# =============================================================================
# Validate Password
# =============================================================================

from enum import Enum, auto

from mailsetup.core.validation import SUCCESS, Failure, ValidationError, ValidationResult


class ValidatePasswordError(ValidationError, Enum):
    EMPTY_PASSWORD = auto()


class ValidatePassword:
    """The password is required. Passwords made of spaces only are rejected as well."""

    def execute(self, input: str) -> ValidationResult:
        if not input.strip():
            return Failure(ValidatePasswordError.EMPTY_PASSWORD)
        return SUCCESS
