# =============================================================================
# Validate Email Signature
# =============================================================================

from enum import Enum, auto

from mailsetup.core.validation import SUCCESS, Failure, ValidationError, ValidationResult


class ValidateEmailSignatureError(ValidationError, Enum):
    BLANK_EMAIL_SIGNATURE = auto()


class ValidateEmailSignature:
    """An empty signature is fine; one made only of whitespace is not."""

    def execute(self, input: str) -> ValidationResult:
        if input and not input.strip():
            return Failure(ValidateEmailSignatureError.BLANK_EMAIL_SIGNATURE)
        return SUCCESS
