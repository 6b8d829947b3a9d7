"""Shared fixtures: an isolated SQLite database per test and customer builders."""

from __future__ import annotations

import os
import pathlib
import sys
from datetime import datetime

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_TIMEZONE", "UTC")
os.environ.setdefault("OPENAI_API_KEY", "test")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from crm.domain.entities import Customer


@pytest.fixture()
def session():
    """Return a session bound to a fresh in-memory database."""

    from crm.infrastructure.database import Base, initialize_database

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = factory()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


def _build_customer(customer_id: int = 1, **overrides) -> Customer:
    values = {
        "id": customer_id,
        "name": "John Smith",
        "email": "john.smith@example.com",
        "phone": "555-123-4567",
        "total_spend": 1250.50,
        "last_order_date": datetime(2025, 4, 15),
        "visit_count": 8,
        "created_at": datetime(2024, 12, 15),
    }
    values.update(overrides)
    return Customer(**values)


@pytest.fixture()
def make_customer():
    return _build_customer
