"""
Service layer.

Services hold business rules between controllers and repositories:
- users: registration, uniqueness, deletion with posts
- posts: authorship, slugs, publication state
- email: SendGrid delivery, used from background tasks
- deps: FastAPI dependency providers
"""

from .email import EmailService
from .posts import PostService
from .users import UserService

__all__ = ["EmailService", "PostService", "UserService"]
