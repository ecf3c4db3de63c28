"""Salted email hashing (adapter for EmailHasherProtocol).

    email_hash = sha256(lower(email) + salt).hexdigest()

The salt is stored beside the digest, so this only hides emails from casual
inspection and allows exact-match comparison. Finding the record for an
email means recomputing the digest with each candidate's salt.
"""

import hashlib
import hmac
import secrets

SALT_BYTES = 16


class SaltedEmailHasher:
    """sha256-based email hasher.

    Example:
        >>> hasher = SaltedEmailHasher()
        >>> salt = hasher.generate_salt()
        >>> digest = hasher.hash_email("Alice@KnownCorp.com", salt)
        >>> hasher.matches("alice@knowncorp.com", salt, digest)
        True
    """

    def generate_salt(self) -> str:
        """Return 16 random bytes as 32 hex characters."""
        return secrets.token_hex(SALT_BYTES)

    def hash_email(self, email: str, salt: str) -> str:
        normalized = email.strip().lower()
        return hashlib.sha256(f"{normalized}{salt}".encode("utf-8")).hexdigest()

    def matches(self, email: str, salt: str, email_hash: str) -> bool:
        return hmac.compare_digest(self.hash_email(email, salt), email_hash)
