"""Name search, ordering and pagination shared by the list queries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import asc, desc
from sqlalchemy.orm import Query

SORT_DIRECTIONS: tuple[str, ...] = ("asc", "desc")


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so ``term`` matches literally."""

    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def apply_listing(
    query: Query,
    *,
    name_column: Any,
    id_column: Any,
    sortable: Mapping[str, Any],
    search: str | None,
    sort_field: str,
    sort_direction: str,
    skip: int,
    limit: int | None,
) -> Query:
    """Filter ``query`` by a case-insensitive name fragment, then order and page it.

    ``sort_field`` uses wire attribute names and must be a key of ``sortable``.
    Ties are broken by id in the same direction.
    """

    column = sortable.get(sort_field)
    if column is None:
        allowed = ", ".join(sortable)
        raise ValueError(f"Unsupported sort field '{sort_field}' (expected one of {allowed})")

    direction = sort_direction.strip().lower() if isinstance(sort_direction, str) else ""
    if direction not in SORT_DIRECTIONS:
        raise ValueError("Sort direction must be 'asc' or 'desc'")

    if search is not None and search.strip():
        pattern = f"%{escape_like(search.strip())}%"
        query = query.filter(name_column.ilike(pattern, escape="\\"))

    order = asc if direction == "asc" else desc
    query = query.order_by(order(column), order(id_column))
    if skip:
        query = query.offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query


__all__ = ["SORT_DIRECTIONS", "apply_listing", "escape_like"]
