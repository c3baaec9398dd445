"""
Controllers: the adapter between FastAPI routes and services.
"""

from .base import BaseController
from .posts import PostController
from .users import UserController

__all__ = ["BaseController", "PostController", "UserController"]
