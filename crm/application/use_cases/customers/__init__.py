"""Use cases for managing customers."""

from .create_customer import create_customer
from .delete_customers import delete_customers
from .list_customers import list_customers

__all__ = [
    "create_customer",
    "delete_customers",
    "list_customers",
]
