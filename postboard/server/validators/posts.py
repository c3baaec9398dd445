"""
Post payload validation.
"""

from __future__ import annotations

from postboard.core.errors import ValidationError
from postboard.core.models.io.posts import PostCreate, PostUpdate

from .common import FieldErrors, check_length

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
BODY_MAX_LENGTH = 20000


def validate_post_create(payload: PostCreate) -> PostCreate:
    """Validate and normalize a new post.

    Raises:
        ValidationError: with one message per invalid field
    """
    errors = FieldErrors()
    if payload.author_id < 1:
        errors.add("author_id", "must be a positive integer")
    title = check_length(errors, "title", payload.title, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)
    body = check_length(errors, "body", payload.body, 1, BODY_MAX_LENGTH)
    errors.raise_if_any()
    return PostCreate(author_id=payload.author_id, title=title, body=body, published=payload.published)


def validate_post_update(payload: PostUpdate) -> PostUpdate:
    """Validate and normalize a partial post update.

    Raises:
        ValidationError: when no field is set or any present field is invalid
    """
    provided = payload.model_dump(exclude_unset=True)
    if not provided:
        raise ValidationError("No fields to update")

    errors = FieldErrors()
    for field, min_length, max_length in (
        ("title", TITLE_MIN_LENGTH, TITLE_MAX_LENGTH),
        ("body", 1, BODY_MAX_LENGTH),
    ):
        if field not in provided:
            continue
        if provided[field] is None:
            errors.add(field, "must not be null")
        else:
            provided[field] = check_length(errors, field, provided[field], min_length, max_length)
    errors.raise_if_any()
    return PostUpdate(**provided)
