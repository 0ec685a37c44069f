# =============================================================================
# Account Incoming Config Validator
# =============================================================================
# Validation for the incoming (IMAP) server step. Each method hands the value to
# the matching single-purpose use case unchanged.
# =============================================================================

from mailsetup.core.validation import ValidationResult, ValidationUseCase
from mailsetup.usecase import ValidatePassword, ValidatePort, ValidateServer, ValidateUsername


class AccountIncomingConfigValidator:
    """Delegates each field of the incoming (IMAP) server step to its use case."""

    def __init__(
        self,
        server_validator: ValidationUseCase[str] | None = None,
        port_validator: ValidationUseCase[int | None] | None = None,
        username_validator: ValidationUseCase[str] | None = None,
        password_validator: ValidationUseCase[str] | None = None,
    ) -> None:
        self.server_validator = server_validator or ValidateServer()
        self.port_validator = port_validator or ValidatePort()
        self.username_validator = username_validator or ValidateUsername()
        self.password_validator = password_validator or ValidatePassword()

    def validate_server(self, server: str) -> ValidationResult:
        return self.server_validator.execute(server)

    def validate_port(self, port: int | None) -> ValidationResult:
        return self.port_validator.execute(port)

    def validate_username(self, username: str) -> ValidationResult:
        return self.username_validator.execute(username)

    def validate_password(self, password: str) -> ValidationResult:
        return self.password_validator.execute(password)
