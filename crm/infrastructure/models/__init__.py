"""ORM models used by the application infrastructure."""

from .campaign import CampaignModel
from .customer import CustomerModel

__all__ = [
    "CampaignModel",
    "CustomerModel",
]
