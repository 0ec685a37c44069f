# =============================================================================
# Account Options Contract
# =============================================================================
# Last step of the wizard: how the account presents itself.
#   - account_name:    label in the account list (optional)
#   - display_name:    the "From" name (required)
#   - email_signature: appended to outgoing mail (optional)
# =============================================================================

from dataclasses import dataclass, field
from typing import Protocol

from mailsetup.core.input import StringInputField
from mailsetup.core.validation import ValidationResult


@dataclass(frozen=True)
class State:
    account_name: StringInputField = field(default_factory=StringInputField)
    display_name: StringInputField = field(default_factory=StringInputField)
    email_signature: StringInputField = field(default_factory=StringInputField)


@dataclass(frozen=True)
class AccountNameChanged:
    account_name: str


@dataclass(frozen=True)
class DisplayNameChanged:
    display_name: str


@dataclass(frozen=True)
class EmailSignatureChanged:
    email_signature: str


class Validator(Protocol):
    def validate_account_name(self, account_name: str) -> ValidationResult: ...

    def validate_display_name(self, display_name: str) -> ValidationResult: ...

    def validate_email_signature(self, email_signature: str) -> ValidationResult: ...
