"""Result types for railway-oriented programming.

Handlers return ``Result`` values instead of raising for business failures,
so every failure path is explicit and testable.

Usage:
    async def handle(self, cmd: LoginUser) -> Result[AuthenticatedSession, DomainError]:
        if user is None:
            return Failure(error=AuthenticationError(...))
        return Success(value=session)

    match await handler.handle(cmd):
        case Success(value=session):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
