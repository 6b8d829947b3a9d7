"""Use case for generating audience rules from a natural-language description."""

from __future__ import annotations

from typing import Any, Protocol

from crm.domain.entities import RuleSet
from .validators import validate_rule_candidates


class RuleGenerator(Protocol):
    def generate_rule_candidates(self, description: str) -> list[Any]: ...


def generate_rule_set(description: str, *, generator: RuleGenerator) -> RuleSet:
    """Ask ``generator`` for candidate rules and validate them as one batch.

    ``GenerationError`` from the generator and ``MalformedRuleError`` from the
    validator propagate unchanged; no partial rule set is ever returned.
    """

    candidates = generator.generate_rule_candidates(description)
    return validate_rule_candidates(candidates)


__all__ = ["RuleGenerator", "generate_rule_set"]
