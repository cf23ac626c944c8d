from datetime import datetime, timedelta, timezone

import jwt

from backend.core import config

TOKEN_TYPE = "bearer"


def create_access_token(user_id: int, expires_minutes: int | None = None) -> str:
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=expires_minutes or config.JWT_EXPIRES_MINUTES)
    payload = {"sub": str(user_id), "exp": expire, "iat": issued_at}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )


def get_token_user_id(token: str) -> int | None:
    """Return the user id a session token was issued for, or None if it is unusable."""
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError:
        return None
    try:
        return int(payload["sub"])
    except (TypeError, ValueError):
        return None
