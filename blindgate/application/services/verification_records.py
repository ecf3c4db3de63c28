"""Recompute-and-compare helpers over salted verification records.

A record stores only ``email_hash`` and the salt that produced it, so the
only way to find "the record for this email" is to recompute the digest
with each candidate's salt. Candidates come back ordered by creation time
and the first match wins.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TypeVar
from uuid import UUID

from uuid_extensions import uuid7

from blindgate.application.dtos import ContinuationTokenResult
from blindgate.application.services.one_time_secrets import (
    new_continuation_token,
    new_verification_code,
)
from blindgate.domain.entities.email_verification import EmailVerification
from blindgate.domain.entities.verification_challenge import VerificationChallenge
from blindgate.domain.enums import VerificationKind
from blindgate.domain.protocols import EmailHasherProtocol, EmailVerificationRepository

ChallengeT = TypeVar("ChallengeT", bound=VerificationChallenge)


def first_match(
    records: Iterable[ChallengeT],
    email: str,
    hasher: EmailHasherProtocol,
) -> ChallengeT | None:
    """Return the first record whose hash recomputes from ``email``."""
    for record in records:
        if hasher.matches(email, record.email_salt, record.email_hash):
            return record
    return None


@dataclass(frozen=True, kw_only=True)
class IssuedCode:
    """Upserted record and the plaintext code to send (never persisted elsewhere)."""

    record: EmailVerification
    code: str
    reused: bool


@dataclass(frozen=True, kw_only=True)
class VerifiedCode:
    """Verified record and the continuation token handed to the client."""

    record: VerificationChallenge
    token: ContinuationTokenResult


class EmailVerificationRecords:
    """Code issue and code check for registration records of one path.

    Example:
        >>> records = EmailVerificationRecords(repo, hasher, code_ttl, token_ttl)
        >>> issued = await records.issue_code(email, VerificationKind.GENERAL, None)
        >>> record = await records.verify_code(email, issued.code, VerificationKind.GENERAL, None)
    """

    def __init__(
        self,
        verification_repo: EmailVerificationRepository,
        hasher: EmailHasherProtocol,
        *,
        code_ttl: timedelta,
        token_ttl: timedelta,
    ) -> None:
        self._verification_repo = verification_repo
        self._hasher = hasher
        self._code_ttl = code_ttl
        self._token_ttl = token_ttl

    async def issue_code(
        self,
        email: str,
        kind: VerificationKind,
        company_id: UUID | None,
    ) -> IssuedCode:
        """Upsert the record for ``email`` with a fresh code.

        An existing record in the same scope (kind and company) is reset:
        new code and expiry, ``verified`` cleared, token dropped. Otherwise a
        record is created with a fresh salt.
        """
        code = new_verification_code()
        expires_at = datetime.now(UTC) + self._code_ttl

        existing = first_match(
            await self._verification_repo.list_in_scope(kind, company_id),
            email,
            self._hasher,
        )
        if existing is not None:
            existing.reissue_code(code, expires_at)
            await self._verification_repo.update(existing)
            return IssuedCode(record=existing, code=code, reused=True)

        salt = self._hasher.generate_salt()
        record = EmailVerification(
            id=uuid7(),
            email_hash=self._hasher.hash_email(email, salt),
            email_salt=salt,
            kind=kind,
            company_id=company_id,
            code=code,
            code_expires_at=expires_at,
        )
        await self._verification_repo.save(record)
        return IssuedCode(record=record, code=code, reused=False)

    async def verify_code(
        self,
        email: str,
        code: str,
        kind: VerificationKind,
        company_id: UUID | None,
    ) -> VerifiedCode | None:
        """Mark the matching record verified and give it a continuation token.

        Returns:
            The verified record and its token, or None when no pending record with this
            code recomputes from ``email``.
        """
        candidates = await self._verification_repo.list_pending_with_code(
            kind, company_id, code
        )
        record = first_match(
            (candidate for candidate in candidates if candidate.is_code_valid(code)),
            email,
            self._hasher,
        )
        if record is None:
            return None

        token = ContinuationTokenResult(
            continuation_token=new_continuation_token(),
            expires_at=datetime.now(UTC) + self._token_ttl,
        )
        record.mark_verified(token.continuation_token, token.expires_at)
        await self._verification_repo.update(record)
        return VerifiedCode(record=record, token=token)

    async def resolve_token(self, token: str) -> EmailVerification | None:
        """Return the record for a usable continuation token, else None."""
        record = await self._verification_repo.find_by_continuation_token(token)
        if record is None or not record.has_usable_token():
            return None
        return record
