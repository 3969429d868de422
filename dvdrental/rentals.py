"""Queries on rentals."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List

from dvdrental.entities import Rental
from dvdrental.repository import Repository


class RentalRepository(Repository[Rental]):
    """Data access for rentals."""

    model = Rental

    def find_by_customer(self, customer_id: int) -> List[Rental]:
        """Return rentals made by the given customer."""
        return self._fetch_all(self._select(Rental.customer_id == customer_id))

    def find_by_staff(self, staff_id: int) -> List[Rental]:
        """Return rentals handled by the given staff member."""
        return self._fetch_all(self._select(Rental.staff_id == staff_id))

    def find_by_inventory(self, inventory_id: int) -> List[Rental]:
        """Return rentals of the given inventory item."""
        return self._fetch_all(self._select(Rental.inventory_id == inventory_id))

    def find_by_date_range(self, start_date: datetime, end_date: datetime) -> List[Rental]:
        """Return rentals made between the two dates, both included."""
        return self._fetch_all(self._select(Rental.rental_date.between(start_date, end_date)))

    def find_overdue(self, days_overdue: int) -> List[Rental]:
        """Return unreturned rentals made more than ``days_overdue`` days ago."""
        cutoff = datetime.now() - timedelta(days=days_overdue)
        return self._fetch_all(
            self._select(Rental.return_date.is_(None), Rental.rental_date < cutoff)
        )

    def find_returned(self) -> List[Rental]:
        """Return rentals that have been returned."""
        return self._fetch_all(self._select(Rental.return_date.is_not(None)))

    def find_not_returned(self) -> List[Rental]:
        """Return rentals that are still out."""
        return self._fetch_all(self._select(Rental.return_date.is_(None)))