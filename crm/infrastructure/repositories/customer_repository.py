"""Persistence layer for customer records."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from sqlalchemy import asc, delete, select
from sqlalchemy.orm import Session

from crm.domain.entities import Customer
from crm.infrastructure.models import CustomerModel
from crm.utils import ensure_app_naive_datetime
from .listing import apply_listing

SORTABLE_CUSTOMER_FIELDS = {
    "name": CustomerModel.name,
    "email": CustomerModel.email,
    "totalSpend": CustomerModel.total_spend,
    "visitCount": CustomerModel.visit_count,
    "lastOrderDate": CustomerModel.last_order_date,
    "createdAt": CustomerModel.created_at,
}


class CustomerRepository:
    """Provide create, list and delete operations for customers."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        skip: int = 0,
        limit: int | None = 100,
        search: str | None = None,
        sort_field: str = "createdAt",
        sort_direction: str = "desc",
    ) -> Sequence[Customer]:
        query = apply_listing(
            self.session.query(CustomerModel),
            name_column=CustomerModel.name,
            id_column=CustomerModel.id,
            sortable=SORTABLE_CUSTOMER_FIELDS,
            search=search,
            sort_field=sort_field,
            sort_direction=sort_direction,
            skip=skip,
            limit=limit,
        )
        return [self._to_entity(model) for model in query.all()]

    def iter_customers(self, *, batch_size: int = 500) -> Iterator[Customer]:
        """Stream every customer in id order without loading the table at once."""

        statement = (
            select(CustomerModel)
            .order_by(asc(CustomerModel.id))
            .execution_options(yield_per=batch_size)
        )
        for model in self.session.scalars(statement):
            yield self._to_entity(model)

    def get(self, customer_id: int) -> Customer | None:
        model = self.session.get(CustomerModel, customer_id)
        return self._to_entity(model) if model else None

    def create(self, customer: Customer) -> Customer:
        model = CustomerModel()
        self._apply_entity_to_model(model, customer)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_many(self, customer_ids: Sequence[int]) -> int:
        """Delete the customers in ``customer_ids`` and return how many were removed."""

        if not customer_ids:
            return 0
        result = self.session.execute(
            delete(CustomerModel).where(CustomerModel.id.in_(list(customer_ids)))
        )
        self.session.commit()
        return result.rowcount or 0

    @staticmethod
    def _to_entity(model: CustomerModel) -> Customer:
        return Customer(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            total_spend=model.total_spend,
            last_order_date=ensure_app_naive_datetime(model.last_order_date),
            visit_count=model.visit_count,
            created_at=ensure_app_naive_datetime(model.created_at),
            attributes=dict(model.attributes or {}),
        )

    @staticmethod
    def _apply_entity_to_model(model: CustomerModel, customer: Customer) -> None:
        model.name = customer.name
        model.email = customer.email
        model.phone = customer.phone
        model.total_spend = customer.total_spend
        model.last_order_date = ensure_app_naive_datetime(customer.last_order_date)
        model.visit_count = customer.visit_count
        if customer.created_at is not None:
            model.created_at = ensure_app_naive_datetime(customer.created_at)
        model.attributes = dict(customer.attributes)


__all__ = ["SORTABLE_CUSTOMER_FIELDS", "CustomerRepository"]
