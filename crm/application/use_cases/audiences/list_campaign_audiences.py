"""Use case for listing campaigns together with their current audience."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from crm.application.use_cases.campaigns import list_campaigns
from crm.domain.entities import AudienceResolution, Campaign
from crm.domain.segmentation import resolve_audience
from crm.infrastructure.repositories import CustomerRepository


@dataclass(frozen=True)
class CampaignAudience:
    """A campaign and the audience its rule set resolves to right now."""

    campaign: Campaign
    audience: AudienceResolution

    @property
    def audience_size(self) -> int:
        return self.audience.count


def list_campaign_audiences(
    session: Session,
    *,
    skip: int = 0,
    limit: int | None = 100,
    search: str | None = None,
    sort_field: str = "createdAt",
    sort_direction: str = "desc",
) -> Sequence[CampaignAudience]:
    """Return campaigns (newest first by default), each with its resolved audience.

    Customers are read once and shared by every campaign's scan.
    """

    campaigns = list_campaigns(
        session,
        skip=skip,
        limit=limit,
        search=search,
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
    if not campaigns:
        return []

    customers = list(CustomerRepository(session).iter_customers())
    return [
        CampaignAudience(campaign=campaign, audience=resolve_audience(campaign.rule_set, customers))
        for campaign in campaigns
    ]
