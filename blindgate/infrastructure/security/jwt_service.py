"""JWT session token service (adapter).

Implements SessionTokenProtocol using PyJWT with HMAC-SHA256.

The token only proves which session it was issued for. The session row is
the source of truth: a deleted or expired row rejects the token even while
its signature is valid. The signature lifetime must therefore be at least
the session lifetime (checked by Settings).

Claims:
    sub: user id
    user_id: user id
    session_id: session id
    iat / exp: issue and expiry timestamps
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError

from blindgate.core.result import Failure, Result, Success
from blindgate.domain.protocols.session_token_protocol import SessionClaims


class JWTService:
    """Session token generation and validation.

    Usage:
        token_service = JWTService(secret_key=settings.secret_key, expires_in=timedelta(days=7))
        token = token_service.create_session_token(user_id, session_id)

        match token_service.decode_session_token(token):
            case Success(value=claims):
                claims.session_id
            case Failure(error=reason):
                ...
    """

    def __init__(
        self,
        secret_key: str,
        expires_in: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC secret, at least 32 bytes.
            expires_in: Signature lifetime (default 7 days).
            algorithm: HMAC algorithm (default HS256).

        Raises:
            ValueError: If secret_key is shorter than 32 bytes.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        self._secret_key = secret_key
        self._expires_in = expires_in
        self._algorithm = algorithm

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in

    def create_session_token(self, user_id: UUID, session_id: UUID) -> str:
        now = datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "user_id": str(user_id),
            "session_id": str(session_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def decode_session_token(self, token: str) -> Result[SessionClaims, str]:
        """Verify signature and expiry and extract the session claims.

        Returns:
            Success(SessionClaims), or Failure with a short reason for logs.
            Callers collapse every failure into one user-facing error.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "session_id", "user_id"]},
            )
        except InvalidTokenError as e:
            return Failure(error=type(e).__name__)

        try:
            claims = SessionClaims(
                user_id=UUID(str(payload["user_id"])),
                session_id=UUID(str(payload["session_id"])),
            )
        except ValueError:
            return Failure(error="MalformedClaims")

        return Success(value=claims)
