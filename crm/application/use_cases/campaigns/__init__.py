"""Use cases for managing campaigns."""

from .create_campaign import create_campaign
from .get_campaign import get_campaign
from .list_campaigns import list_campaigns
from .suggest_message import MessageSuggester, suggest_campaign_message

__all__ = [
    "MessageSuggester",
    "create_campaign",
    "get_campaign",
    "list_campaigns",
    "suggest_campaign_message",
]
