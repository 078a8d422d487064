# =============================================================================
# lib/tokens.py - Signed Token Issuer
# =============================================================================
# Issues and verifies HS256 JWTs carrying a subject id and an expiry.
#
# Claims:
#   sub  - subject id
#   _id  - same subject id, under the key older clients read
#   iat  - issue time
#   exp  - iat + ttl
#
# Usage:
#   from lib.tokens import TokenIssuer
#   issuer = TokenIssuer()
#   token = issuer.issue("12345", secret, ttl_seconds=3600)
#   issuer.verify(token, secret)  # "12345"
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from app.exceptions import ConfigurationError, InvalidSignatureError, TokenExpiredError


class TokenIssuer:
    """
    Signed-token creation and verification with a shared secret.

    The secret is passed per call rather than stored, so one issuer can
    serve several signing keys.
    """

    def __init__(self, algorithm: str = "HS256", logger: logging.Logger | None = None):
        self.algorithm = algorithm
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _require_secret(secret: str | None) -> str:
        if not secret or not secret.strip():
            raise ConfigurationError("JWT_SECRET")
        return secret

    def issue(
        self,
        subject_id: str,
        secret: str,
        ttl_seconds: int,
        now: datetime | None = None,
    ) -> str:
        """
        Create a signed token for a subject.

        Args:
            subject_id: Id written into the sub and _id claims
            secret: Signing key
            ttl_seconds: Seconds until the token expires
            now: Issue time (defaults to the current UTC time)

        Returns:
            The encoded token

        Raises:
            ConfigurationError: If secret is empty or ttl_seconds is not positive
        """
        self._require_secret(secret)
        if ttl_seconds <= 0:
            raise ConfigurationError("JWT_EXPIRES_SECONDS", reason="must be positive")

        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": str(subject_id),
            "_id": str(subject_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + timedelta(seconds=ttl_seconds)).timestamp()),
        }
        token = jwt.encode(claims, secret, algorithm=self.algorithm)
        self.logger.debug("JWT token generated", extra={"sub": claims["sub"], "exp": claims["exp"]})
        return token

    def verify(self, token: str, secret: str) -> str:
        """
        Verify a token and return its subject id.

        Raises:
            ConfigurationError: If secret is empty
            TokenExpiredError: If the exp claim has passed
            InvalidSignatureError: If the token is malformed, tampered with,
                or signed with a different secret
        """
        self._require_secret(secret)

        try:
            payload = jwt.decode(token, secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except JWTError as e:
            raise InvalidSignatureError(str(e)) from e

        subject_id = payload.get("sub") or payload.get("_id")
        if not subject_id:
            raise InvalidSignatureError("token has no subject")
        return subject_id
