# =============================================================================
# Validate Username
# =============================================================================

from enum import Enum, auto

from mailsetup.core.validation import SUCCESS, Failure, ValidationError, ValidationResult


class ValidateUsernameError(ValidationError, Enum):
    EMPTY_USERNAME = auto()


class ValidateUsername:
    """The login name is required."""

    def execute(self, input: str) -> ValidationResult:
        if not input.strip():
            return Failure(ValidateUsernameError.EMPTY_USERNAME)
        return SUCCESS
