"""Use case for listing customers."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from crm.domain.entities import Customer
from crm.infrastructure.repositories import CustomerRepository


def list_customers(
    session: Session,
    *,
    skip: int = 0,
    limit: int | None = 100,
    search: str | None = None,
    sort_field: str = "createdAt",
    sort_direction: str = "desc",
) -> Sequence[Customer]:
    """Return a paginated list of customers, most recently created first by default.

    ``search`` matches a case-insensitive fragment of the name. ``sort_field``
    is one of ``name``, ``email``, ``totalSpend``, ``visitCount``,
    ``lastOrderDate`` or ``createdAt``; anything else raises ``ValueError``.
    """

    return CustomerRepository(session).list(
        skip=skip,
        limit=limit,
        search=search,
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
