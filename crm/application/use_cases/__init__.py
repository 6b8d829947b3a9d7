"""Aggregate application use cases."""

from .audiences import preview_audience, resolve_campaign_audience
from .campaigns import create_campaign, list_campaigns
from .rules import generate_rule_set, validate_rule_candidates

__all__ = [
    "create_campaign",
    "generate_rule_set",
    "list_campaigns",
    "preview_audience",
    "resolve_campaign_audience",
    "validate_rule_candidates",
]
