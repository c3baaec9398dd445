"""
I/O models for API requests and responses.

Modules:
- common: Response envelopes and pagination metadata
- users: User I/O models
- posts: Post I/O models
"""

from .common import Envelope, ErrorBody, ErrorEnvelope, PageMeta
from .posts import PostCreate, PostDeleted, PostRead, PostUpdate
from .users import UserCreate, UserDeleted, UserRead, UserUpdate

__all__ = [
    "Envelope",
    "ErrorBody",
    "ErrorEnvelope",
    "PageMeta",
    "PostCreate",
    "PostDeleted",
    "PostRead",
    "PostUpdate",
    "UserCreate",
    "UserDeleted",
    "UserRead",
    "UserUpdate",
]
