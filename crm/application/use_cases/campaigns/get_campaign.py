"""Use case for retrieving a single campaign."""

from sqlalchemy.orm import Session

from crm.domain.entities import Campaign
from crm.infrastructure.repositories import CampaignRepository


def get_campaign(session: Session, campaign_id: int) -> Campaign:
    """Return the campaign identified by ``campaign_id`` or raise an error."""

    campaign = CampaignRepository(session).get(campaign_id)
    if campaign is None:
        raise ValueError("Campaign not found")
    return campaign
