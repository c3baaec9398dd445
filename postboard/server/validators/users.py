"""
User payload validation.

Normalizes e-mail addresses (trimmed, lowercase) and text fields (trimmed) and
reports every invalid field at once.
"""

from __future__ import annotations

import re

from postboard.core.errors import ValidationError
from postboard.core.models.io.users import UserCreate, UserUpdate

from .common import FieldErrors, check_length

EMAIL_MAX_LENGTH = 254
NAME_MAX_LENGTH = 100
BIO_MAX_LENGTH = 500

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(errors: FieldErrors, email: str) -> str:
    email = email.strip().lower()
    if len(email) > EMAIL_MAX_LENGTH:
        errors.add("email", f"must be at most {EMAIL_MAX_LENGTH} characters")
    elif not EMAIL_PATTERN.match(email):
        errors.add("email", "must be a valid e-mail address")
    return email


def validate_user_create(payload: UserCreate) -> UserCreate:
    """Validate and normalize a registration payload.

    Raises:
        ValidationError: with one message per invalid field
    """
    errors = FieldErrors()
    email = normalize_email(errors, payload.email)
    name = check_length(errors, "name", payload.name, 1, NAME_MAX_LENGTH)
    bio = check_length(errors, "bio", payload.bio, 0, BIO_MAX_LENGTH)
    errors.raise_if_any()
    return UserCreate(email=email, name=name, bio=bio or None)


def validate_user_update(payload: UserUpdate) -> UserUpdate:
    """Validate and normalize a partial user update.

    Only fields present in the request are checked and returned.

    Raises:
        ValidationError: when no field is set or any present field is invalid
    """
    provided = payload.model_dump(exclude_unset=True)
    if not provided:
        raise ValidationError("No fields to update")

    errors = FieldErrors()
    if "email" in provided:
        if provided["email"] is None:
            errors.add("email", "must not be null")
        else:
            provided["email"] = normalize_email(errors, provided["email"])
    if "name" in provided:
        if provided["name"] is None:
            errors.add("name", "must not be null")
        else:
            provided["name"] = check_length(errors, "name", provided["name"], 1, NAME_MAX_LENGTH)
    if "bio" in provided and provided["bio"] is not None:
        provided["bio"] = check_length(errors, "bio", provided["bio"], 0, BIO_MAX_LENGTH) or None
    if "is_active" in provided and provided["is_active"] is None:
        errors.add("is_active", "must not be null")
    errors.raise_if_any()
    return UserUpdate(**provided)
