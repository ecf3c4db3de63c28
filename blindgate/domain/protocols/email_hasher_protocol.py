"""EmailHasherProtocol - salted one-way email digests.

This is obfuscation plus exact-match comparison, not a password-grade hash:
the salt is stored next to the digest.
"""

from typing import Protocol


class EmailHasherProtocol(Protocol):
    def generate_salt(self) -> str:
        """Return a fresh random salt as a printable string."""
        ...

    def hash_email(self, email: str, salt: str) -> str:
        """Digest of the lowercased email concatenated with the salt."""
        ...

    def matches(self, email: str, salt: str, email_hash: str) -> bool:
        """Recompute the digest with ``salt`` and compare in constant time."""
        ...
