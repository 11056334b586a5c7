# File: getlocalbuddy/models/post.py

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from getlocalbuddy.models.base import Base
from getlocalbuddy.models.user import User, _utcnow


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), index=True, nullable=False
    )

    # Set in Python so rows inserted within the same second still order correctly
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        index=True,
        nullable=False,
    )
    like_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)

    author: Mapped[User] = relationship(back_populates="posts")
