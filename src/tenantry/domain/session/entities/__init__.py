from tenantry.domain.session.entities.auth_session import AuthSession

__all__ = ["AuthSession"]
