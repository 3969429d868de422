"""Queries on customers."""

from __future__ import annotations

from typing import List

from dvdrental.entities import Customer
from dvdrental.repository import Repository


class CustomerRepository(Repository[Customer]):
    """Data access for customers."""

    model = Customer

    def find_by_name(self, name: str) -> List[Customer]:
        """Return customers whose first or last name contains ``name``."""
        pattern = f"%{name}%"
        return self._fetch_all(
            self._select(Customer.first_name.like(pattern) | Customer.last_name.like(pattern))
        )

    def find_by_email(self, email: str) -> Customer:
        """Return the customer with the given e-mail address."""
        return self._fetch_first(self._select(Customer.email == email))

    def find_by_store(self, store_id: int) -> List[Customer]:
        """Return the customers registered at the given store."""
        return self._fetch_all(self._select(Customer.store_id == store_id))

    def _by_activity(self, active: bool) -> List[Customer]:
        return self._fetch_all(self._select(Customer.active == active))

    def find_active(self) -> List[Customer]:
        """Return active customers."""
        return self._by_activity(True)

    def find_inactive(self) -> List[Customer]:
        """Return inactive customers."""
        return self._by_activity(False)