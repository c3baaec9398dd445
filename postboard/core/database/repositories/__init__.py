"""
Database repository layer using SQLModel.

Every ORM query of the application lives in this package, one repository per
entity, all built on the shared ``BaseRepository``.

Modules:
- base: shared BaseRepository CRUD and QueryBuilder utilities
- users: User repository operations
- posts: Post repository operations
- bundle: RepoBundle for dependency injection
"""

from .base import BaseRepository, QueryBuilder
from .bundle import RepoBundle, build_repos
from .posts import PostRepository
from .users import UserRepository

__all__ = [
    "BaseRepository",
    "PostRepository",
    "QueryBuilder",
    "RepoBundle",
    "UserRepository",
    "build_repos",
]
