"""Use cases for resolving campaign audiences."""

from .list_campaign_audiences import CampaignAudience, list_campaign_audiences
from .preview_audience import preview_audience
from .resolve_campaign_audience import resolve_campaign_audience

__all__ = [
    "CampaignAudience",
    "list_campaign_audiences",
    "preview_audience",
    "resolve_campaign_audience",
]
