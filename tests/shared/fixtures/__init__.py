"""Shared fixtures for tests."""
