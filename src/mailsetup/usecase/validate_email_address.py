# =============================================================================
# Validate Email Address
# =============================================================================
# A deliberately loose check: one "@", something before it, and a dotted
# domain after it with no whitespace anywhere. Whether the mailbox exists is
# for the server to decide.
# =============================================================================

import re
from enum import Enum, auto

from mailsetup.core.validation import SUCCESS, Failure, ValidationError, ValidationResult

# local-part@domain.tld
EMAIL_ADDRESS_PATTERN = re.compile(r"^[^@\s]+@[^@\s.]+(\.[^@\s.]+)+$")


class ValidateEmailAddressError(ValidationError, Enum):
    EMPTY_EMAIL_ADDRESS = auto()
    INVALID_EMAIL_ADDRESS = auto()


class ValidateEmailAddress:
    """Checks that an email address is present and looks like one."""

    def execute(self, input: str) -> ValidationResult:
        address = input.strip()
        if not address:
            return Failure(ValidateEmailAddressError.EMPTY_EMAIL_ADDRESS)
        if not EMAIL_ADDRESS_PATTERN.match(address):
            return Failure(ValidateEmailAddressError.INVALID_EMAIL_ADDRESS)
        return SUCCESS
