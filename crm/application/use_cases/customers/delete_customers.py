"""Use case for deleting customers in bulk."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from crm.infrastructure.repositories import CustomerRepository

logger = logging.getLogger(__name__)


def delete_customers(session: Session, customer_ids: Sequence[int]) -> int:
    """Delete the customers in ``customer_ids`` and return how many were removed."""

    if isinstance(customer_ids, (str, bytes)) or not isinstance(customer_ids, Sequence):
        raise ValueError("customer_ids must be a list of customer ids")
    if not customer_ids:
        raise ValueError("No customer IDs provided")

    deleted = CustomerRepository(session).delete_many(customer_ids)
    if deleted == 0:
        raise ValueError("No customers found with the provided IDs")

    logger.info("Deleted %d customer(s)", deleted)
    return deleted
