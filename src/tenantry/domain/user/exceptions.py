"""User domain exceptions.

Custom exceptions for the user domain, used for validation, conflicts and
authentication failures.
"""

from tenantry.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
    UnauthorizedError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "User with this email already exists",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class InvalidCredentialsError(UnauthorizedError):
    """Login rejected because the user is unknown or the password is wrong."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message, code=ErrorCode.INVALID_CREDENTIALS)


class AccountDeactivatedError(UnauthorizedError):
    """Login rejected because the account is deactivated."""

    def __init__(self, message: str = "User account is deactivated") -> None:
        super().__init__(message, code=ErrorCode.ACCOUNT_DEACTIVATED)
