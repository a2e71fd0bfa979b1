"""Ports the application layer needs from infrastructure."""

from tenantry.application.ports.unit_of_work import UnitOfWork

__all__ = ["UnitOfWork"]
