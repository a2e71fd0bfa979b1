"""Tenantry - multi-tenant identity: registration, login and tokens."""
