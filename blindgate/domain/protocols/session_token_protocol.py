"""SessionTokenProtocol - signing and verification of session bearer tokens."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from blindgate.core.result import Result


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionClaims:
    """Claims embedded in a session token."""

    user_id: UUID
    session_id: UUID


class SessionTokenProtocol(Protocol):
    """Session token port (JWTService implements it)."""

    def create_session_token(self, user_id: UUID, session_id: UUID) -> str:
        """Sign a token bound to ``session_id``."""
        ...

    def decode_session_token(self, token: str) -> Result[SessionClaims, str]:
        """Verify signature and expiry.

        Returns:
            Success(SessionClaims) or Failure(reason). Every failure kind
            (expired, malformed, wrong signature) is a Failure, never raised.
        """
        ...
