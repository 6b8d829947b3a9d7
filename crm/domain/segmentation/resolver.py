"""Resolution of a rule set across a customer population."""

from __future__ import annotations

from collections.abc import Iterable

from crm.domain.entities import AudienceResolution, Customer, RuleSet

from .evaluator import compile_rule_set


def resolve_audience(rule_set: RuleSet, customers: Iterable[Customer]) -> AudienceResolution:
    """Return the ids of ``customers`` matching ``rule_set`` in iteration order.

    This is a linear scan; records are read through ``Customer.as_record`` and
    never modified.
    """

    matches = compile_rule_set(rule_set)
    matched_ids = tuple(
        str(customer.id) for customer in customers if matches(customer.as_record())
    )
    return AudienceResolution(matched_customer_ids=matched_ids)


__all__ = ["resolve_audience"]
