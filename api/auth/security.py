"""
Password hashing helpers.
"""

from __future__ import annotations

import bcrypt

# Fixed cost factor; stored hashes carry their own cost so this can change later.
BCRYPT_ROUNDS = 10
# bcrypt only reads the first 72 bytes; newer releases raise instead of truncating.
BCRYPT_MAX_PASSWORD_BYTES = 72


class AuthSecurityError(RuntimeError):
    pass


def _password_bytes(plain_password: str) -> bytes:
    return (plain_password or "").encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plain_password: str) -> str:
    password = _password_bytes(plain_password)
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = _password_bytes(plain_password)
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False
