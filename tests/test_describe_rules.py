from crm.application.use_cases.rules import describe_rule, describe_rule_set
from crm.application.use_cases.rules.describe_rules import EMPTY_RULE_SET_TEXT
from crm.domain.entities import LogicGate, Rule, RuleSet


def test_single_rule_reads_field_operator_value():
    assert describe_rule(Rule("totalSpend", ">", "1000", LogicGate.OR)) == "totalSpend > 1000"


def test_empty_rule_set_is_described_explicitly():
    assert describe_rule_set(RuleSet()) == EMPTY_RULE_SET_TEXT


def test_same_join_is_not_parenthesized():
    rule_set = RuleSet.of(
        [
            Rule("totalSpend", ">", "1000"),
            Rule("lastOrderDate", ">", "2025-01-01", LogicGate.AND),
            Rule("visitCount", ">=", "3"),
        ]
    )

    assert describe_rule_set(rule_set) == (
        "totalSpend > 1000 AND lastOrderDate > 2025-01-01 AND visitCount >= 3"
    )


def test_changing_join_groups_the_left_side():
    rule_set = RuleSet.of(
        [
            Rule("totalSpend", ">", "1000"),
            Rule("visitCount", ">", "10", LogicGate.OR),
            Rule("name", "contains", "Smith", LogicGate.AND),
        ]
    )

    assert describe_rule_set(rule_set) == (
        "(totalSpend > 1000 OR visitCount > 10) AND name contains Smith"
    )


def test_not_gate_negates_only_its_rule():
    rule_set = RuleSet.of(
        [
            Rule("visitCount", ">", "5", LogicGate.NOT),
            Rule("totalSpend", ">", "2000", LogicGate.OR),
        ]
    )

    assert describe_rule_set(rule_set) == "NOT visitCount > 5 OR totalSpend > 2000"
