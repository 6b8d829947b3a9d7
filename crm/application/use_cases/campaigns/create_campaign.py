"""Use case for creating campaigns."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from crm.application.use_cases.rules import ensure_rule_set
from crm.domain.entities import Campaign, RuleSet
from crm.infrastructure.repositories import CampaignRepository
from crm.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def create_campaign(
    session: Session,
    *,
    name: str,
    rules: RuleSet | Sequence[Any],
    summary: str | None = None,
    created_at: datetime | None = None,
) -> Campaign:
    """Create a campaign targeting the audience described by ``rules``.

    Raw rule candidates are validated as one batch; a ``MalformedRuleError``
    leaves the store untouched.
    """

    if not isinstance(name, str) or not name.strip():
        raise ValueError("Campaign name is required")

    rule_set = ensure_rule_set(rules)
    if summary is not None:
        summary = summary.strip() or None

    entity = Campaign(
        id=None,
        name=name.strip(),
        rule_set=rule_set,
        created_at=created_at or now_in_app_timezone(),
        summary=summary,
    )
    campaign = CampaignRepository(session).create(entity)
    logger.info("Created campaign %s with %d audience rules", campaign.id, len(rule_set))
    return campaign
