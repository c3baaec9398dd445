"""Shared validation helpers."""

from __future__ import annotations

import re
import unicodedata
from typing import Dict, Optional, Tuple

from postboard.core.errors import ValidationError

MAX_PAGE_SIZE = 100
SLUG_MAX_LENGTH = 80

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


class FieldErrors:
    """Collects per-field messages and raises them together."""

    def __init__(self) -> None:
        self.errors: Dict[str, str] = {}

    def add(self, field: str, message: str) -> None:
        self.errors.setdefault(field, message)

    def raise_if_any(self) -> None:
        if self.errors:
            names = ", ".join(sorted(self.errors))
            raise ValidationError(f"Invalid fields: {names}", fields=self.errors)


def check_length(
    errors: FieldErrors,
    field: str,
    value: Optional[str],
    min_length: int = 0,
    max_length: Optional[int] = None,
) -> Optional[str]:
    """Strip ``value`` and record an error when its length is out of range."""
    if value is None:
        return None
    value = value.strip()
    if len(value) < min_length:
        if min_length == 1:
            errors.add(field, "must not be blank")
        else:
            errors.add(field, f"must be at least {min_length} characters")
    elif max_length is not None and len(value) > max_length:
        errors.add(field, f"must be at most {max_length} characters")
    return value


def slugify(title: str) -> str:
    """Derive a URL-safe slug from a title.

    Accents are folded to ASCII, runs of other characters become a single ``-``
    and the result is cut to ``SLUG_MAX_LENGTH`` without a trailing dash.

    Raises:
        ValidationError: when nothing usable remains
    """
    folded = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    slug = _NON_ALNUM.sub("-", folded.lower()).strip("-")
    slug = slug[:SLUG_MAX_LENGTH].rstrip("-")
    if not slug:
        raise ValidationError.for_field("title", "must contain at least one letter or digit")
    return slug


def validate_pagination(limit: int, offset: int) -> Tuple[int, int]:
    """Check list pagination parameters.

    Raises:
        ValidationError: when limit is outside 1..MAX_PAGE_SIZE or offset is negative
    """
    errors = FieldErrors()
    if limit < 1 or limit > MAX_PAGE_SIZE:
        errors.add("limit", f"must be between 1 and {MAX_PAGE_SIZE}")
    if offset < 0:
        errors.add("offset", "must not be negative")
    errors.raise_if_any()
    return limit, offset
