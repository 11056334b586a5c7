# File: getlocalbuddy/services/user_service.py

import logging

from sqlalchemy.orm import Session

from getlocalbuddy.core.errors import NotFound
from getlocalbuddy.models.user import User
from getlocalbuddy.schemas.user import UserUpdate

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found.")
    return user


def update_user(db: Session, user_id: int, payload: UserUpdate) -> User:
    """Apply only the fields present in the request body."""
    user = get_user(db, user_id)

    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(user, field, value)

    db.commit()
    db.refresh(user)
    logger.debug("Updated profile for user id=%s", user.id)
    return user
