"""Use case for listing campaigns."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from crm.domain.entities import Campaign
from crm.infrastructure.repositories import CampaignRepository


def list_campaigns(
    session: Session,
    *,
    skip: int = 0,
    limit: int | None = 100,
    search: str | None = None,
    sort_field: str = "createdAt",
    sort_direction: str = "desc",
) -> Sequence[Campaign]:
    """Return a paginated list of campaigns, newest first by default.

    Campaigns can be filtered by a case-insensitive name fragment and sorted by
    ``name`` or ``createdAt`` in either direction.
    """

    return CampaignRepository(session).list(
        skip=skip,
        limit=limit,
        search=search,
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
