"""
Credential hashing - bcrypt implementation of the PasswordHasher port.

The hasher is an immutable configuration value (the work factor).
Each digest embeds its own salt and cost, so hashing the same password
twice yields different digests that both verify.
"""

from dataclasses import dataclass
from functools import lru_cache

import bcrypt

DEFAULT_ROUNDS = 10


@dataclass(frozen=True)
class BcryptHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    rounds: int = DEFAULT_ROUNDS

    def hash(self, password: str) -> str:
        """Hash password with a fresh salt at the configured cost."""
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check password against a stored digest.

        Comparison is done by bcrypt.checkpw (constant-time). A malformed
        or empty digest is reported as a mismatch, not an error.
        """
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode())
        except ValueError:
            return False

    def dummy_hash(self) -> str:
        """Digest of a fixed throwaway password at this hasher's cost."""
        return _dummy_hash(self.rounds)


@lru_cache
def _dummy_hash(rounds: int) -> str:
    return bcrypt.hashpw(b"dummy_password_for_timing_safety", bcrypt.gensalt(rounds)).decode()


def _encode(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; newer releases reject longer input
    return password.encode()[:72]
