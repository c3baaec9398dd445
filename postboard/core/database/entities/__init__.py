"""
Database entity models.

Modules:
- users: User accounts
- posts: Posts authored by users
"""

from . import posts, users
from .posts import Post
from .users import User

__all__ = ["Post", "User", "posts", "users"]
