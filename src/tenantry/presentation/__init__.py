"""Presentation adapters."""
