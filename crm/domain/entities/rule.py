"""Domain entities describing audience segmentation rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload


class LogicGate(str, Enum):
    """Gate joining a rule to the rule before it."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


class Operator(str, Enum):
    """Comparison operators understood by the evaluator."""

    EQ = "="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    CONTAINS = "contains"

    @classmethod
    def parse(cls, raw: str) -> Operator | None:
        """Return the operator matching ``raw`` or ``None`` when unrecognised."""

        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(frozen=True)
class Rule:
    """Atomic predicate over one customer attribute.

    ``operator`` is kept as free text: an unrecognised operator is legal in a
    stored rule and simply never matches.
    """

    field: str
    operator: str
    value: str
    logic_gate: LogicGate | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Rule:
        """Rebuild a stored rule; an unreadable gate is dropped (joins as AND)."""

        raw_gate = payload.get("logicGate")
        try:
            gate = LogicGate(raw_gate.strip().upper()) if isinstance(raw_gate, str) else None
        except ValueError:
            gate = None
        return cls(
            field=str(payload.get("field", "")),
            operator=str(payload.get("operator", "")),
            value=str(payload.get("value", "")),
            logic_gate=gate,
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the wire representation used by campaigns and generators."""

        payload: dict[str, Any] = {
            "field": self.field,
            "operator": self.operator,
            "value": self.value,
        }
        if self.logic_gate is not None:
            payload["logicGate"] = self.logic_gate.value
        return payload


@dataclass(frozen=True)
class RuleSet:
    """Ordered, immutable sequence of rules forming one audience expression."""

    rules: tuple[Rule, ...] = ()

    @classmethod
    def of(cls, rules: Iterable[Rule]) -> RuleSet:
        return cls(tuple(rules))

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @overload
    def __getitem__(self, index: int) -> Rule: ...

    @overload
    def __getitem__(self, index: slice) -> RuleSet: ...

    def __getitem__(self, index: int | slice) -> Rule | RuleSet:
        if isinstance(index, slice):
            return RuleSet(self.rules[index])
        return self.rules[index]

    def is_empty(self) -> bool:
        return not self.rules

    def to_payload(self) -> list[dict[str, Any]]:
        return [rule.to_payload() for rule in self.rules]


__all__ = ["LogicGate", "Operator", "Rule", "RuleSet"]
