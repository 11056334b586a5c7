# File: getlocalbuddy/core/security.py

"""
Password hashing helpers.

bcrypt does the salting and the constant-time comparison; we only deal
with encoding and the configured cost factor.
"""

import bcrypt

from getlocalbuddy.core.config import settings

# bcrypt only looks at the first 72 bytes; bcrypt>=5 refuses anything longer
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if password_too_long(password):
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash in storage
        return False
