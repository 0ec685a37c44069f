# =============================================================================
# Validate Port
# =============================================================================
# Ports are entered as optional numbers: None means the field is empty.
# Both ends of the range are accepted.
# =============================================================================

from enum import Enum, auto

from mailsetup.core.validation import SUCCESS, Failure, ValidationError, ValidationResult


class ValidatePortError(ValidationError, Enum):
    EMPTY_PORT = auto()
    INVALID_PORT = auto()


class ValidatePort:
    """Checks that a port is present and within 0-65535."""

    MIN_PORT_NUMBER = 0
    MAX_PORT_NUMBER = 65535

    def execute(self, input: int | None) -> ValidationResult:
        if input is None:
            return Failure(ValidatePortError.EMPTY_PORT)
        if input < self.MIN_PORT_NUMBER or input > self.MAX_PORT_NUMBER:
            return Failure(ValidatePortError.INVALID_PORT)
        return SUCCESS
