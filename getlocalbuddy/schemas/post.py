# File: getlocalbuddy/schemas/post.py

from datetime import datetime
from typing import Optional

from getlocalbuddy.schemas.user import CamelModel


class PostCreate(CamelModel):
    content: Optional[str] = None
    author_id: Optional[int] = None


class PostAuthor(CamelModel):
    id: int
    name: str
    avatar_url: str


class PostRead(CamelModel):
    id: int
    content: str
    author_id: int
    created_at: datetime
    like_count: int = 0
    author: PostAuthor
