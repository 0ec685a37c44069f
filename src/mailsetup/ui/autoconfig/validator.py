# =============================================================================
# Account Auto Config Validator
# =============================================================================

from mailsetup.core.validation import ValidationResult, ValidationUseCase
from mailsetup.usecase import ValidateEmailAddress, ValidatePassword


class AccountAutoConfigValidator:
    """Delegates each field of the auto config step to its use case."""

    def __init__(
        self,
        email_address_validator: ValidationUseCase[str] | None = None,
        password_validator: ValidationUseCase[str] | None = None,
    ) -> None:
        self.email_address_validator = email_address_validator or ValidateEmailAddress()
        self.password_validator = password_validator or ValidatePassword()

    def validate_email_address(self, email_address: str) -> ValidationResult:
        return self.email_address_validator.execute(email_address)

    def validate_password(self, password: str) -> ValidationResult:
        return self.password_validator.execute(password)
