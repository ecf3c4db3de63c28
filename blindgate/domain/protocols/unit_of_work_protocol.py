"""UnitOfWorkProtocol - transaction boundary for a workflow step.

Repositories only flush. A handler calls ``commit()`` once, after every
write of the step, so the step's writes commit together or not at all.
"""

from typing import Protocol


class UnitOfWorkProtocol(Protocol):
    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...
