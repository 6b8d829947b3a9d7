"""Evaluation of audience rules against a single customer record.

A rule set is folded strictly left to right. Each rule's gate joins it to the
result accumulated so far; ``NOT`` negates only the rule it decorates and then
joins like ``AND``. There is no grouping and no operator precedence.

Evaluation never raises: unknown fields, unknown operators and values that
cannot be compared all degrade to ``False`` so a single bad rule cannot abort
the scan of a whole audience.
"""

from __future__ import annotations

import logging
import operator as op
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

from crm.domain.entities import LogicGate, Operator, Rule, RuleSet

from .values import lookup, parse_date, parse_number

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]

_COMPARATORS: dict[Operator, Callable[[Any, Any], bool]] = {
    Operator.EQ: op.eq,
    Operator.NE: op.ne,
    Operator.GT: op.gt,
    Operator.GE: op.ge,
    Operator.LT: op.lt,
    Operator.LE: op.le,
}


def evaluate_rule(rule: Rule, record: Record) -> bool:
    """Return whether ``record`` satisfies ``rule``, ignoring the rule's gate."""

    try:
        return _evaluate_rule(rule, record)
    except (AttributeError, TypeError, ValueError, OverflowError):
        logger.debug("Rule %r could not be evaluated; treating it as no match", rule, exc_info=True)
        return False


def _evaluate_rule(rule: Rule, record: Record) -> bool:
    comparison = Operator.parse(rule.operator)
    if comparison is None:
        logger.debug("Unknown operator %r in rule on field %r", rule.operator, rule.field)
        return False

    actual = lookup(record, rule.field)
    if actual.is_absent:
        logger.debug("Field %r is absent from the record; rule does not match", rule.field)
        return False

    if comparison is Operator.CONTAINS:
        return rule.value in actual.as_text()

    compare = _COMPARATORS[comparison]

    left_number = actual.as_number()
    right_number = parse_number(rule.value)
    if left_number is not None and right_number is not None:
        return compare(left_number, right_number)

    left_date = actual.as_date()
    if left_date is not None:
        right_date = parse_date(rule.value)
        if right_date is not None:
            return compare(left_date, right_date)

    return compare(actual.as_text(), rule.value)


def _gated_result(rule: Rule, record: Record) -> bool:
    result = evaluate_rule(rule, record)
    return not result if rule.logic_gate is LogicGate.NOT else result


def evaluate_rule_set(rule_set: RuleSet, record: Record) -> bool:
    """Fold ``rule_set`` over ``record``; an empty rule set matches nothing."""

    if rule_set.is_empty():
        return False

    first, *rest = rule_set.rules
    accumulated = _gated_result(first, record)
    for rule in rest:
        # Every rule is evaluated before combining; no short circuit.
        result = _gated_result(rule, record)
        if rule.logic_gate is LogicGate.OR:
            accumulated = accumulated or result
        else:
            accumulated = accumulated and result
    return accumulated


def compile_rule_set(rule_set: RuleSet) -> Callable[[Record], bool]:
    """Return a predicate over records bound to ``rule_set``."""

    return partial(evaluate_rule_set, rule_set)


__all__ = ["Record", "compile_rule_set", "evaluate_rule", "evaluate_rule_set"]
