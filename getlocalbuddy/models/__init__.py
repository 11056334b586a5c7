from getlocalbuddy.models.base import Base
from getlocalbuddy.models.post import Post
from getlocalbuddy.models.user import User

__all__ = ["Base", "Post", "User"]
