# File: getlocalbuddy/services/post_service.py

"""
Post timeline service.

Listing embeds a minimal author projection (id, display name, avatar) so
the frontend never sees other users' emails or hashes.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from getlocalbuddy.core.config import settings
from getlocalbuddy.core.errors import NotFound, ValidationFailed
from getlocalbuddy.models.post import Post
from getlocalbuddy.models.user import User
from getlocalbuddy.schemas.post import PostAuthor, PostRead

logger = logging.getLogger(__name__)


def display_name(user: User) -> str:
    """Explicit name if set, otherwise the local part of the email."""
    if user.name:
        return user.name
    return user.email.split("@", 1)[0]


def avatar_url(user: User, template: Optional[str] = None) -> str:
    if user.avatar_url:
        return user.avatar_url
    return (template or settings.avatar_url_template).format(user_id=user.id)


def to_post_read(post: Post) -> PostRead:
    author = post.author
    return PostRead(
        id=post.id,
        content=post.content,
        author_id=post.author_id,
        created_at=post.created_at,
        like_count=post.like_count,
        author=PostAuthor(
            id=author.id,
            name=display_name(author),
            avatar_url=avatar_url(author),
        ),
    )


def list_posts(db: Session) -> list[PostRead]:
    stmt = (
        select(Post)
        .options(joinedload(Post.author))
        .order_by(Post.created_at.desc(), Post.id.desc())
    )
    return [to_post_read(p) for p in db.scalars(stmt)]


def create_post(
    db: Session,
    *,
    content: Optional[str],
    author_id: Optional[int],
) -> PostRead:
    if not content or not content.strip() or author_id is None:
        raise ValidationFailed("Content and authorId are required.")

    if db.get(User, author_id) is None:
        raise NotFound("User not found.")

    post = Post(content=content, author_id=author_id)
    db.add(post)
    db.commit()
    db.refresh(post)

    logger.debug("Created post id=%s by user id=%s", post.id, author_id)
    return to_post_read(post)
