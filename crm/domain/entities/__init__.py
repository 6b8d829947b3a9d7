"""Domain entities exposed by the application."""

from .audience import AudienceResolution
from .campaign import Campaign
from .customer import CUSTOMER_FIELDS, Customer
from .rule import LogicGate, Operator, Rule, RuleSet

__all__ = [
    "AudienceResolution",
    "Campaign",
    "CUSTOMER_FIELDS",
    "Customer",
    "LogicGate",
    "Operator",
    "Rule",
    "RuleSet",
]
