from __future__ import annotations

from typing import Any

from ..core.constants import MAX_ROWS_PER_PAGE
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_positive_int(value: Any, field_name: str) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}")
    if number <= 0:
        raise ValidationError(f"Invalid {field_name}")
    return number


def require_page(page: Any, rows_per_page: Any) -> tuple[int, int]:
    """Validate a 0-based page and a page size; returns (offset, limit)."""

    try:
        page_i = int(page)
        size_i = int(rows_per_page)
    except (TypeError, ValueError):
        raise ValidationError("page and rowsPerPage must be integers")
    if page_i < 0 or size_i <= 0 or size_i > MAX_ROWS_PER_PAGE:
        raise ValidationError("page or rowsPerPage out of range")
    return page_i * size_i, size_i
