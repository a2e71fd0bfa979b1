"""Application services for identity management."""

from tenantry.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = ["AuthenticationService"]
