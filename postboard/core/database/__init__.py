"""
Database layer for Postboard.

Structure:
- entities/: SQLModel table models (users, posts)
- repositories/: Data access layer, one repository per entity
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and schema helpers
"""

from .base import Base
from .session import (
    async_session_maker,
    dispose_engine,
    engine,
    get_session,
    init_db,
    ping,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "dispose_engine",
    "drop_all",
    "engine",
    "get_session",
    "init_db",
    "ping",
]
