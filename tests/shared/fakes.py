"""Hand-written test doubles shared across test packages."""

from tenantry.application.ports import UnitOfWork


class RecordingUnitOfWork(UnitOfWork):
    """UnitOfWork that only counts commits and rollbacks."""

    def __init__(self, fail_on_commit: bool = False):
        self.commits = 0
        self.rollbacks = 0
        self._fail_on_commit = fail_on_commit

    async def commit(self) -> None:
        if self._fail_on_commit:
            msg = "commit failed"
            raise RuntimeError(msg)
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1
