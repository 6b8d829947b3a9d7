"""Use case for previewing the audience of a rule set before saving a campaign."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy.orm import Session

from crm.application.use_cases.rules import ensure_rule_set
from crm.domain.entities import AudienceResolution, RuleSet
from crm.domain.segmentation import resolve_audience
from crm.infrastructure.repositories import CustomerRepository


def preview_audience(
    session: Session, *, rules: RuleSet | Sequence[Any]
) -> AudienceResolution:
    """Return the customers currently matching ``rules``."""

    rule_set = ensure_rule_set(rules)
    return resolve_audience(rule_set, CustomerRepository(session).iter_customers())
