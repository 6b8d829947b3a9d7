"""Repository implementations for infrastructure layer."""

from .campaign_repository import CampaignRepository
from .customer_repository import CustomerRepository

__all__ = [
    "CampaignRepository",
    "CustomerRepository",
]
