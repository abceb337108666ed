"""Credential handling: JWT issuance and the per-request actor identity."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from fastapi import Header
from jose import jwt
from jose.exceptions import JWTError

from hintline.common.config import HintlineSettings, get_settings
from hintline.common.exceptions import UnauthenticatedError

logger = logging.getLogger(__name__)


class Role(str, Enum):
    USER = "user"
    SUPPORT_SPECIALIST = "support_specialist"
    ADMIN = "admin"


STAFF_ROLES = frozenset({Role.SUPPORT_SPECIALIST, Role.ADMIN})


@dataclass(frozen=True)
class ActorIdentity:
    """Who is making the request. Derived from the credential, never stored."""
    id: str
    role: Role

    @property
    def is_staff(self) -> bool:
        return self.role in STAFF_ROLES


def create_access_token(
    subject: str,
    role: Role | str,
    settings: HintlineSettings | None = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Sign a token carrying ``sub`` and ``role`` claims."""
    settings = settings or get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    claims = {
        "sub": subject,
        "role": Role(role).value,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_identity(
    token: str | None, settings: HintlineSettings | None = None,
) -> ActorIdentity:
    """Verify a token and turn its claims into an ActorIdentity."""
    if not token:
        raise UnauthenticatedError()

    settings = settings or get_settings()
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError as e:
        logger.warning("JWT authentication error: %s", e)
        raise UnauthenticatedError("Invalid or expired authentication token.") from e

    subject = claims.get("sub")
    try:
        role = Role(claims.get("role"))
    except ValueError:
        logger.warning("Token for %s carries unknown role %r", subject, claims.get("role"))
        raise UnauthenticatedError("Invalid or expired authentication token.")

    if not subject:
        raise UnauthenticatedError("Invalid or expired authentication token.")
    return ActorIdentity(id=str(subject), role=role)


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer ...`` header value."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization.split(" ", 1)[1].strip() or None


async def require_identity(
    authorization: str | None = Header(None),
) -> ActorIdentity:
    """FastAPI dependency resolving the caller from the bearer token."""
    return decode_identity(bearer_token(authorization))
