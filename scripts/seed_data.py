"""Utility script to load sample customers and campaigns into the database."""

from __future__ import annotations

import argparse
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from crm.application.use_cases.audiences import list_campaign_audiences
from crm.application.use_cases.campaigns import create_campaign
from crm.application.use_cases.customers import create_customer
from crm.application.use_cases.rules import describe_rule_set
from crm.infrastructure.database import SessionLocal, initialize_database
from crm.utils import parse_iso_datetime

SAMPLE_CUSTOMERS: list[dict[str, Any]] = [
    {
        "name": "John Smith",
        "email": "john.smith@example.com",
        "phone": "555-123-4567",
        "total_spend": 1250.50,
        "last_order_date": "2025-04-15",
        "visit_count": 8,
        "created_at": "2024-12-15",
    },
    {
        "name": "Emily Johnson",
        "email": "emily.johnson@example.com",
        "phone": "555-987-6543",
        "total_spend": 3450.75,
        "last_order_date": "2025-05-02",
        "visit_count": 12,
        "created_at": "2025-01-20",
    },
    {
        "name": "Michael Rodriguez",
        "email": "michael.r@example.com",
        "phone": "555-234-5678",
        "total_spend": 890.25,
        "last_order_date": "2025-04-28",
        "visit_count": 4,
        "created_at": "2025-03-10",
    },
    {
        "name": "Sarah Chen",
        "email": "sarah.chen@example.com",
        "phone": "555-345-6789",
        "total_spend": 5250.00,
        "last_order_date": "2025-05-05",
        "visit_count": 15,
        "created_at": "2024-11-05",
    },
    {
        "name": "David Patel",
        "email": "david.patel@example.com",
        "phone": "555-456-7890",
        "total_spend": 2150.25,
        "last_order_date": "2025-04-20",
        "visit_count": 9,
        "created_at": "2025-02-15",
    },
]

SAMPLE_CAMPAIGNS: list[dict[str, Any]] = [
    {
        "name": "Spring Sale 2025",
        "audienceQuery": [
            {"field": "totalSpend", "operator": ">", "value": "1000", "logicGate": "AND"},
            {"field": "lastOrderDate", "operator": ">", "value": "2025-01-01"},
        ],
        "summary": "Seasonal discount for recent high-value customers.",
    },
    {
        "name": "Win Back Occasional Visitors",
        "audienceQuery": [
            {"field": "visitCount", "operator": ">", "value": "5", "logicGate": "NOT"},
            {"field": "totalSpend", "operator": ">=", "value": "500", "logicGate": "AND"},
        ],
        "summary": "Re-engage customers who rarely visit.",
    },
]


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the sample data loader."""

    parser = argparse.ArgumentParser(
        description="Load sample customers and campaigns into the CRM database.",
    )
    parser.add_argument(
        "--skip-campaigns",
        action="store_true",
        help="Only load the sample customers.",
    )
    return parser.parse_args()


def main() -> None:
    """Insert the sample records and print each campaign's audience size."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        for customer in SAMPLE_CUSTOMERS:
            create_customer(
                session,
                name=customer["name"],
                email=customer["email"],
                phone=customer["phone"],
                total_spend=customer["total_spend"],
                last_order_date=parse_iso_datetime(customer["last_order_date"]),
                visit_count=customer["visit_count"],
                created_at=parse_iso_datetime(customer["created_at"]),
            )
        if not args.skip_campaigns:
            for campaign in SAMPLE_CAMPAIGNS:
                create_campaign(
                    session,
                    name=campaign["name"],
                    rules=campaign["audienceQuery"],
                    summary=campaign["summary"],
                )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not load the sample data: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error saving the sample data to the database: {exc}") from exc
    else:
        print(f"Loaded {len(SAMPLE_CUSTOMERS)} customers.")
        for entry in list_campaign_audiences(session):
            print(
                f"  {entry.campaign.name}: {entry.audience_size} customers"
                f" ({describe_rule_set(entry.campaign.rule_set)})"
            )
    finally:
        session.close()


if __name__ == "__main__":
    main()
