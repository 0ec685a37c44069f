# =============================================================================
# Auto Config Contract
# =============================================================================
# First step of the wizard: who is the user? Email address and password.
# =============================================================================

from dataclasses import dataclass, field
from typing import Protocol

from mailsetup.core.input import StringInputField
from mailsetup.core.validation import ValidationResult


@dataclass(frozen=True)
class State:
    email_address: StringInputField = field(default_factory=StringInputField)
    password: StringInputField = field(default_factory=StringInputField)


@dataclass(frozen=True)
class EmailAddressChanged:
    email_address: str


@dataclass(frozen=True)
class PasswordChanged:
    password: str


class Validator(Protocol):
    def validate_email_address(self, email_address: str) -> ValidationResult: ...

    def validate_password(self, password: str) -> ValidationResult: ...
