# =============================================================================
# Account Options Validator
# =============================================================================

from mailsetup.core.validation import ValidationResult, ValidationUseCase
from mailsetup.usecase import ValidateAccountName, ValidateDisplayName, ValidateEmailSignature


class AccountOptionsValidator:
    """Delegates each field of the options step to its use case."""

    def __init__(
        self,
        account_name_validator: ValidationUseCase[str] | None = None,
        display_name_validator: ValidationUseCase[str] | None = None,
        email_signature_validator: ValidationUseCase[str] | None = None,
    ) -> None:
        self.account_name_validator = account_name_validator or ValidateAccountName()
        self.display_name_validator = display_name_validator or ValidateDisplayName()
        self.email_signature_validator = email_signature_validator or ValidateEmailSignature()

    def validate_account_name(self, account_name: str) -> ValidationResult:
        return self.account_name_validator.execute(account_name)

    def validate_display_name(self, display_name: str) -> ValidationResult:
        return self.display_name_validator.execute(display_name)

    def validate_email_signature(self, email_signature: str) -> ValidationResult:
        return self.email_signature_validator.execute(email_signature)
