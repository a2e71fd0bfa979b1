"""Session domain: token pairs handed out to users."""

from tenantry.domain.session.entities import AuthSession
from tenantry.domain.session.repositories import SessionRepository

__all__ = [
    "AuthSession",
    "SessionRepository",
]
