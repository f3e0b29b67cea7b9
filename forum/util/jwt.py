"""Encoding and decoding of ``auth_token`` cookies.

Tokens are HMAC-signed JWTs carrying the user's id and roles. This service
only reads them; ``issue_token`` exists for tooling and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims of an auth token."""

    user_id: str
    roles: list[str] = []
    exp: datetime


class JWTError(Exception):
    """Token could not be verified."""


def issue_token(user_id: str, roles: list[str], settings: AuthSettings) -> str:
    """Sign a token for ``user_id`` that expires after the configured days."""
    claims = TokenPayload(
        user_id=user_id,
        roles=roles,
        exp=datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    )
    return jwt.encode(
        claims.model_dump(), settings.jwt_secret, algorithm=settings.jwt_algorithm
    )


def decode_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry and return the claims.

    Raises:
        JWTError: If the token is expired, tampered with or lacks claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Token is missing claims") from e
