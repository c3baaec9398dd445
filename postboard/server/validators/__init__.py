"""
Request validators.

Validators take a parsed request model, check business rules that JSON-schema
validation does not express, and return a normalized copy. They never touch the
database; uniqueness is checked by the services.
"""

from .common import slugify, validate_pagination
from .posts import validate_post_create, validate_post_update
from .users import validate_user_create, validate_user_update

__all__ = [
    "slugify",
    "validate_pagination",
    "validate_post_create",
    "validate_post_update",
    "validate_user_create",
    "validate_user_update",
]
