"""
Repository bundle for dependency injection.

Groups the repositories of one request so services share a single session
and therefore a single transaction.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .posts import PostRepository
from .users import UserRepository


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of all SQL repositories bound to one session."""

    users: UserRepository
    posts: PostRepository


def build_repos(session: AsyncSession) -> RepoBundle:
    """Build a ``RepoBundle`` whose repositories share ``session``.

    Args:
        session: Async session, typically the request-scoped one

    Returns:
        Bundle containing all repository instances
    """
    return RepoBundle(
        users=UserRepository(session),
        posts=PostRepository(session),
    )
