"""Audience segmentation: tagged values, rule evaluation and audience resolution."""

from .evaluator import compile_rule_set, evaluate_rule, evaluate_rule_set
from .resolver import resolve_audience
from .values import ABSENT, FieldValue, ValueKind, lookup, tag_value

__all__ = [
    "ABSENT",
    "FieldValue",
    "ValueKind",
    "compile_rule_set",
    "evaluate_rule",
    "evaluate_rule_set",
    "lookup",
    "resolve_audience",
    "tag_value",
]
