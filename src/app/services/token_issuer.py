"""
Token Issuer

Signs and validates session tokens (JWT, HS256).
"""

from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from pydantic import BaseModel

from src.domain.exceptions import ConfigurationError
from src.libs.result import Error, Result, Return

DEFAULT_TOKEN_TTL = timedelta(hours=10)


class SessionClaims(BaseModel):
    """Identity claims carried by a session token. Never persisted."""

    user_id: UUID
    email: str
    issued_at: datetime
    expires_at: datetime


class TokenIssuer:
    """
    Issues and validates signed session tokens.

    Business Rules:
    - Tokens expire 10 hours after issuance
    - No refresh or rotation: an expired token means a new login
    - Any validation failure is a single INVALID_TOKEN error
    - A missing signing key raises ConfigurationError (deployment defect)
    """

    def __init__(
        self,
        secret: Optional[str],
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        algorithm: str = "HS256",
    ):
        self._secret = secret
        self.ttl = ttl
        self.algorithm = algorithm

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds"""
        return int(self.ttl.total_seconds())

    def _require_secret(self) -> str:
        if not self._secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        return self._secret

    def issue(self, user_id: UUID, email: str, now: Optional[datetime] = None) -> str:
        """
        Generate a signed session token

        Args:
            user_id: User UUID
            email: User email
            now: Issuance instant (defaults to current UTC time)

        Returns:
            JWT token string
        """
        secret = self._require_secret()
        issued_at = now or datetime.now(UTC)
        payload = {
            "user_id": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def validate(self, token: str) -> Result[SessionClaims]:
        """
        Verify signature and expiry and decode the claims

        Args:
            token: JWT token string

        Returns:
            Result with SessionClaims, or INVALID_TOKEN error
        """
        secret = self._require_secret()
        invalid = Error("INVALID_TOKEN", "Invalid or expired token")

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_iat": True},
            )
            claims = SessionClaims(
                user_id=payload["user_id"],
                email=payload["email"],
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (JWTError, KeyError, TypeError, ValueError):
            return Return.err(invalid)

        return Return.ok(claims)
