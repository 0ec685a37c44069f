# =============================================================================
# Validate Server
# =============================================================================

from enum import Enum, auto

from mailsetup.core.validation import SUCCESS, Failure, ValidationError, ValidationResult


class ValidateServerError(ValidationError, Enum):
    EMPTY_SERVER = auto()


class ValidateServer:
    """The server hostname is required."""

    def execute(self, input: str) -> ValidationResult:
        if not input.strip():
            return Failure(ValidateServerError.EMPTY_SERVER)
        return SUCCESS
