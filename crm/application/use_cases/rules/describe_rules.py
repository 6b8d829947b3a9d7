"""Use case for rendering audience rules as readable text."""

from __future__ import annotations

from crm.domain.entities import LogicGate, Rule, RuleSet

EMPTY_RULE_SET_TEXT = "No audience rules (matches no customers)"


def describe_rule(rule: Rule) -> str:
    """Return ``rule`` as ``field operator value``, ignoring its gate."""

    return f"{rule.field} {rule.operator} {rule.value}"


def describe_rule_set(rule_set: RuleSet) -> str:
    """Return the rule set as the left-to-right expression that gets evaluated.

    Parentheses are added whenever the join changes, so ``[A, B(OR), C(AND)]``
    reads ``(A OR B) AND C``.
    """

    if rule_set.is_empty():
        return EMPTY_RULE_SET_TEXT

    first, *rest = rule_set.rules
    expression = _negated(first)
    previous_join: str | None = None
    for rule in rest:
        join = "OR" if rule.logic_gate is LogicGate.OR else "AND"
        if previous_join is not None and previous_join != join:
            expression = f"({expression})"
        expression = f"{expression} {join} {_negated(rule)}"
        previous_join = join
    return expression


def _negated(rule: Rule) -> str:
    text = describe_rule(rule)
    return f"NOT {text}" if rule.logic_gate is LogicGate.NOT else text


__all__ = ["EMPTY_RULE_SET_TEXT", "describe_rule", "describe_rule_set"]
