"""SQLAlchemy model for customer records."""

from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from crm.infrastructure.database import Base
from crm.utils import now_in_app_timezone

_attributes_json_type = JSONB().with_variant(JSON(), "sqlite")


class CustomerModel(Base):
    """Database representation of customers."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(64), nullable=False)
    total_spend = Column(Float, nullable=False, default=0.0)
    last_order_date = Column(DateTime(timezone=True), nullable=True)
    visit_count = Column(Integer, nullable=False, default=0)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    attributes = Column(_attributes_json_type, nullable=False, default=dict)


__all__ = ["CustomerModel"]
