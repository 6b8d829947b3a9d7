"""Persistence layer for campaigns."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from crm.domain.entities import Campaign, Rule, RuleSet
from crm.infrastructure.models import CampaignModel
from crm.utils import ensure_app_naive_datetime
from .listing import apply_listing

SORTABLE_CAMPAIGN_FIELDS = {
    "name": CampaignModel.name,
    "createdAt": CampaignModel.created_at,
}


class CampaignRepository:
    """Provide create and read operations for campaigns.

    Campaigns are immutable once stored, so there is no update or delete.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        skip: int = 0,
        limit: int | None = 100,
        search: str | None = None,
        sort_field: str = "createdAt",
        sort_direction: str = "desc",
    ) -> Sequence[Campaign]:
        query = apply_listing(
            self.session.query(CampaignModel),
            name_column=CampaignModel.name,
            id_column=CampaignModel.id,
            sortable=SORTABLE_CAMPAIGN_FIELDS,
            search=search,
            sort_field=sort_field,
            sort_direction=sort_direction,
            skip=skip,
            limit=limit,
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, campaign_id: int) -> Campaign | None:
        model = self.session.get(CampaignModel, campaign_id)
        return self._to_entity(model) if model else None

    def create(self, campaign: Campaign) -> Campaign:
        model = CampaignModel(
            name=campaign.name,
            audience_query=campaign.rule_set.to_payload(),
            summary=campaign.summary,
        )
        if campaign.created_at is not None:
            model.created_at = ensure_app_naive_datetime(campaign.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CampaignModel) -> Campaign:
        return Campaign(
            id=model.id,
            name=model.name,
            rule_set=RuleSet.of(
                Rule.from_payload(entry)
                for entry in (model.audience_query or [])
                if isinstance(entry, dict)
            ),
            created_at=ensure_app_naive_datetime(model.created_at),
            summary=model.summary,
        )


__all__ = ["SORTABLE_CAMPAIGN_FIELDS", "CampaignRepository"]
