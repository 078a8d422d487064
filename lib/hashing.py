# =============================================================================
# lib/hashing.py - Password Hashing
# =============================================================================
# Salted password hashing with bcrypt. Every call draws a fresh salt, so
# hashing the same password twice gives two different digests that both
# verify against it. Passwords longer than 72 bytes are cut to bcrypt's
# 72-byte limit before hashing and verifying.
#
# Usage:
#   from lib.hashing import PasswordHasher
#   hasher = PasswordHasher(rounds=10)
#   hashed = await hasher.hash("supersecretpassword")
#   hasher.verify("supersecretpassword", hashed)  # True
# =============================================================================

import asyncio
import logging

import bcrypt

from app.exceptions import HashingError

# bcrypt only reads this many bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """
    bcrypt wrapper.

    Hashing is CPU-bound, so the async entry point runs it in a worker
    thread and the event loop keeps serving requests meanwhile.
    """

    def __init__(self, rounds: int = 10, logger: logging.Logger | None = None):
        self.rounds = rounds
        self.logger = logger or logging.getLogger(__name__)

    def hash_sync(self, plaintext: str) -> str:
        """
        Hash a password in the calling thread.

        Raises:
            HashingError: If salt generation or hashing fails
        """
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            hashed = bcrypt.hashpw(_password_bytes(plaintext), salt)
        except (OSError, ValueError) as e:
            raise HashingError(str(e)) from e
        return hashed.decode("utf-8")

    async def hash(self, plaintext: str) -> str:
        """
        Hash a password with a per-call random salt.

        Args:
            plaintext: The password to hash

        Returns:
            The bcrypt digest, including its salt and cost

        Raises:
            HashingError: If salt generation or hashing fails
        """
        hashed = await asyncio.to_thread(self.hash_sync, plaintext)
        self.logger.debug("Password hashed", extra={"rounds": self.rounds})
        return hashed

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a password against a digest. Malformed digests never match."""
        try:
            return bcrypt.checkpw(_password_bytes(plaintext), hashed.encode("utf-8"))
        except ValueError:
            return False
