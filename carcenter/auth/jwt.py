"""JWT token creation and validation."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from carcenter.config import Settings
from carcenter.errors import InvalidToken

ACCESS = "access"
REFRESH = "refresh"


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """The subject of a successful authentication."""

    username: str
    role: str


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issue and verify HMAC-signed access and refresh tokens.

    Stateless apart from the read-only signing configuration, so one
    instance is shared by every request. Expiry is checked against
    ``clock`` rather than inside python-jose, which lets tests move time.
    """

    def __init__(self, settings: Settings, clock: Callable[[], datetime] = _utcnow) -> None:
        self._secret = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm
        self._access_ttl = timedelta(seconds=settings.jwt_access_token_expire_seconds)
        self._refresh_ttl = timedelta(seconds=settings.jwt_refresh_token_expire_seconds)
        self.clock = clock

    @property
    def access_token_expires_in(self) -> int:
        """Access token lifetime in seconds."""
        return int(self._access_ttl.total_seconds())

    def issue_access_token(self, identity: AuthenticatedIdentity) -> str:
        """Create a signed access token carrying the subject and role."""
        return self._encode(
            {"sub": identity.username, "role": identity.role, "type": ACCESS},
            self._access_ttl,
        )

    def issue_refresh_token(self, username: str) -> str:
        """Create a signed refresh token (longer-lived, subject only)."""
        return self._encode({"sub": username, "type": REFRESH}, self._refresh_ttl)

    def validate(self, token: str, expected_type: str | None = None) -> bool:
        """Return True if the token is well-formed, correctly signed and unexpired."""
        try:
            self.claims_of(token, expected_type)
        except InvalidToken:
            return False
        return True

    def subject_of(self, token: str, expected_type: str | None = None) -> str:
        """Return the username a valid token was issued for. Raises ``InvalidToken``."""
        return self.claims_of(token, expected_type)["sub"]

    def claims_of(self, token: str, expected_type: str | None = None) -> dict[str, Any]:
        """Decode and fully check a token. Raises ``InvalidToken`` on any failure."""
        if not isinstance(token, str) or not token:
            raise InvalidToken()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError:
            raise InvalidToken()

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)) or self.clock().timestamp() >= exp:
            raise InvalidToken()

        sub = payload.get("sub")
        if not isinstance(sub, str) or not sub:
            raise InvalidToken()

        if expected_type is not None and payload.get("type") != expected_type:
            raise InvalidToken("Invalid token type")

        return payload

    def _encode(self, claims: dict[str, Any], ttl: timedelta) -> str:
        now = self.clock()
        payload = {
            **claims,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
            # Unique per token, so two tokens minted in the same second differ.
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)
