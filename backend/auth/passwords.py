import base64
import hashlib
import logging

import bcrypt

from backend.core import config

logger = logging.getLogger(__name__)

BCRYPT_MAX_PASSWORD_BYTES = 72
BCRYPT_HASH_LENGTH = 60


def _password_bytes(password: str) -> bytes:
    # bcrypt only reads 72 bytes; longer inputs are condensed so every byte counts.
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        return base64.b64encode(hashlib.sha256(encoded).digest())
    return encoded


def hash_password(password: str) -> bytes:
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt)


def check_password(password: str, hashed_password: bytes | str) -> bool:
    if isinstance(hashed_password, str):
        hashed_password = hashed_password.encode("ascii")
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed_password)
    except ValueError:
        logger.warning("Stored password hash is malformed; treating as a mismatch.")
        return False
