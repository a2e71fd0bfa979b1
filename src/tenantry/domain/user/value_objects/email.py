"""Email value object.

Addresses are the login identifier, so they are compared in normalized
form (trimmed, lower case).
"""

import re
from dataclasses import dataclass
from typing import Optional

from tenantry.domain.user.exceptions import InvalidEmailError

# local@domain.tld, nothing stricter
EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")


def _normalize(value: str) -> str:
    return value.strip().lower()


@dataclass(frozen=True)
class Email:
    """Validated, normalized email address."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        normalized = _normalize(self.value)
        if not EMAIL_PATTERN.match(normalized):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)

        object.__setattr__(self, "value", normalized)

    @classmethod
    def parse(cls, value: str) -> Optional["Email"]:
        """Lookup-side constructor: ``None`` instead of InvalidEmailError.

        Used where a malformed address simply matches no account, such as
        login.
        """
        try:
            return cls(value)
        except InvalidEmailError:
            return None

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
