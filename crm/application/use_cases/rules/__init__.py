"""Use cases for validating, generating and displaying audience rules."""

from .describe_rules import describe_rule, describe_rule_set
from .generate_rules import RuleGenerator, generate_rule_set
from .validators import (
    MalformedRuleError,
    ensure_rule_set,
    normalize_logic_gate,
    validate_rule_candidate,
    validate_rule_candidates,
)

__all__ = [
    "MalformedRuleError",
    "RuleGenerator",
    "describe_rule",
    "describe_rule_set",
    "ensure_rule_set",
    "generate_rule_set",
    "normalize_logic_gate",
    "validate_rule_candidate",
    "validate_rule_candidates",
]
