from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_HOURS, JWT_ALGORITHM
from ..core.enums import Role
from ..core.exceptions import InvalidToken
from ..users.model import CurrentUser, User


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TokenIssuer:
    """Mints and verifies signed, time-limited bearer tokens (HS256 JWT)."""

    secret: str
    ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS
    clock: Callable[[], datetime] = _utcnow

    def issue(self, user: User) -> str:
        now = self.clock()
        payload = {
            "id": user.id,
            "email": user.email,
            "role": user.role.value,
            "iat": now,
            "exp": now + timedelta(hours=self.ttl_hours),
        }
        return jwt.encode(payload, self.secret, algorithm=JWT_ALGORITHM)

    def decode(self, token: str) -> dict[str, Any]:
        try:
            # Expiry is checked here rather than by PyJWT so the injected clock applies.
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp", "id", "role"], "verify_exp": False, "verify_iat": False},
            )
        except jwt.PyJWTError as e:
            raise InvalidToken() from e

        if int(claims["exp"]) <= int(self.clock().timestamp()):
            raise InvalidToken()
        return claims

    def verify(self, token: str) -> CurrentUser:
        claims = self.decode(token)
        try:
            role = Role(claims["role"])
        except ValueError as e:
            raise InvalidToken() from e
        return CurrentUser(id=str(claims["id"]), email=str(claims.get("email", "")), role=role)


def bearer_token(header_value: Optional[str]) -> Optional[str]:
    """Extract the token from an `Authorization: Bearer <token>` header value."""
    if not header_value:
        return None
    parts = header_value.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1] or None
