# =============================================================================
# Validate Account Name
# =============================================================================
# The account name is optional (the email address is used when it's left
# empty), but a name made only of whitespace is almost certainly a mistake.
# =============================================================================

from enum import Enum, auto

from mailsetup.core.validation import SUCCESS, Failure, ValidationError, ValidationResult


class ValidateAccountNameError(ValidationError, Enum):
    BLANK_ACCOUNT_NAME = auto()


class ValidateAccountName:
    def execute(self, input: str) -> ValidationResult:
        if input and not input.strip():
            return Failure(ValidateAccountNameError.BLANK_ACCOUNT_NAME)
        return SUCCESS
