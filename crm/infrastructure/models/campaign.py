"""SQLAlchemy model for campaigns and their audience queries."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from crm.infrastructure.database import Base
from crm.utils import now_in_app_timezone

_audience_query_json_type = JSONB().with_variant(JSON(), "sqlite")


class CampaignModel(Base):
    """Database representation of campaigns.

    ``audience_query`` holds the rule list in its wire shape
    (``field``/``operator``/``value``/``logicGate``).
    """

    __tablename__ = "campaigns"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    audience_query = Column(_audience_query_json_type, nullable=False, default=list)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    summary = Column(Text, nullable=True)


__all__ = ["CampaignModel"]
