"""Queries on payments."""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy import Select, func, select

from dvdrental.entities import Payment, Staff
from dvdrental.repository import Repository


class PaymentRepository(Repository[Payment]):
    """Data access for payments."""

    model = Payment

    def find_by_customer(self, customer_id: int) -> List[Payment]:
        """Return payments made by the given customer."""
        return self._fetch_all(self._select(Payment.customer_id == customer_id))

    def find_by_staff(self, staff_id: int) -> List[Payment]:
        """Return payments taken by the given staff member."""
        return self._fetch_all(self._select(Payment.staff_id == staff_id))

    def find_by_rental(self, rental_id: int) -> Payment:
        """Return the payment settling the given rental."""
        return self._fetch_first(self._select(Payment.rental_id == rental_id))

    def find_by_date_range(self, start_date: datetime, end_date: datetime) -> List[Payment]:
        """Return payments made between the two dates, both included."""
        return self._fetch_all(
            self._select(Payment.payment_date.between(start_date, end_date))
        )

    def find_by_amount_range(self, min_amount: float, max_amount: float) -> List[Payment]:
        """Return payments whose amount lies between the two bounds, both included."""
        return self._fetch_all(self._select(Payment.amount.between(min_amount, max_amount)))

    def _total(self, statement: Select) -> float:
        value = self.session.scalar(statement)
        return 0.0 if value is None else float(value)

    def total_by_customer(self, customer_id: int) -> float:
        """Return the sum of the given customer's payments."""
        statement = select(func.sum(Payment.amount)).where(
            Payment.customer_id == customer_id, Payment.deleted_at.is_(None)
        )
        return self._total(statement)

    def total_by_store(self, store_id: int) -> float:
        """Return the sum of payments taken by staff of the given store."""
        statement = (
            select(func.sum(Payment.amount))
            .select_from(Payment)
            .join(Staff, Payment.staff_id == Staff.staff_id)
            .where(Staff.store_id == store_id, Payment.deleted_at.is_(None))
        )
        return self._total(statement)