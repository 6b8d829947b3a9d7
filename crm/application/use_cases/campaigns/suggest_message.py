"""Use case for suggesting a marketing message for a campaign."""

from __future__ import annotations

from typing import Protocol


class MessageSuggester(Protocol):
    def suggest_message(self, campaign_name: str) -> str: ...


def suggest_campaign_message(campaign_name: str, *, suggester: MessageSuggester) -> str:
    """Return a short message suggestion for ``campaign_name``."""

    if not isinstance(campaign_name, str) or not campaign_name.strip():
        raise ValueError("Campaign name is required")
    return suggester.suggest_message(campaign_name.strip())
