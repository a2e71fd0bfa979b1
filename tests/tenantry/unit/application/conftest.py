"""Fixtures for application service unit tests."""

import pytest

from tests.shared.fakes import RecordingUnitOfWork


@pytest.fixture
def unit_of_work() -> RecordingUnitOfWork:
    return RecordingUnitOfWork()
