# File: getlocalbuddy/services/auth_service.py

"""
Authentication service.

  - register_user: hash + persist a credential
  - authenticate_user: look up by email + verify the hash

Duplicate emails are detected through the database's unique constraint
rather than a lookup beforehand, so two concurrent registrations cannot
both succeed.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from getlocalbuddy.core.errors import Conflict, NotFound, Unauthorized, ValidationFailed
from getlocalbuddy.core.security import hash_password, password_too_long, verify_password
from getlocalbuddy.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Same key for storage and lookup, whatever case the user typed."""
    return email.strip().lower()


def register_user(
    db: Session,
    *,
    email: Optional[str],
    password: Optional[str],
    role: Optional[str] = None,
) -> User:
    if not email or not password:
        raise ValidationFailed("Email and password are required.")

    if password_too_long(password):
        raise ValidationFailed("Password cannot be longer than 72 bytes.")

    user = User(email=normalize_email(email), password_hash=hash_password(password), role=role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Email already exists.")

    db.refresh(user)
    logger.debug("Registered user id=%s", user.id)
    return user


def authenticate_user(
    db: Session,
    *,
    email: Optional[str],
    password: Optional[str],
) -> User:
    if not email or not password:
        raise ValidationFailed("Email and password are required.")

    user = db.scalar(select(User).where(User.email == normalize_email(email)))
    if user is None:
        raise NotFound("User not found.")

    if not verify_password(password, user.password_hash):
        logger.debug("Password mismatch for user id=%s", user.id)
        raise Unauthorized("Invalid password.")

    logger.debug("User id=%s logged in", user.id)
    return user
