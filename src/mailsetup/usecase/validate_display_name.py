# =============================================================================
# Validate Display Name
# =============================================================================

from enum import Enum, auto

from mailsetup.core.validation import SUCCESS, Failure, ValidationError, ValidationResult


class ValidateDisplayNameError(ValidationError, Enum):
    EMPTY_DISPLAY_NAME = auto()


class ValidateDisplayName:
    """The display name ("From" name) is required and must not be blank."""

    def execute(self, input: str) -> ValidationResult:
        if not input.strip():
            return Failure(ValidateDisplayNameError.EMPTY_DISPLAY_NAME)
        return SUCCESS
