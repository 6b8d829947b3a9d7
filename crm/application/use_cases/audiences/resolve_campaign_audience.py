"""Use case for resolving the audience of a stored campaign."""

from sqlalchemy.orm import Session

from crm.application.use_cases.campaigns import get_campaign
from crm.domain.entities import AudienceResolution
from crm.domain.segmentation import resolve_audience
from crm.infrastructure.repositories import CustomerRepository


def resolve_campaign_audience(session: Session, campaign_id: int) -> AudienceResolution:
    """Evaluate the campaign's stored rule set against every customer."""

    campaign = get_campaign(session, campaign_id)
    return resolve_audience(campaign.rule_set, CustomerRepository(session).iter_customers())
