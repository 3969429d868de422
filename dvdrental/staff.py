"""Queries on staff members."""

from __future__ import annotations

from typing import List

from dvdrental.entities import Staff
from dvdrental.repository import Repository


class StaffRepository(Repository[Staff]):
    """Data access for staff members."""

    model = Staff

    def find_by_name(self, name: str) -> List[Staff]:
        """Return staff whose first or last name contains ``name``."""
        pattern = f"%{name}%"
        return self._fetch_all(
            self._select(Staff.first_name.like(pattern) | Staff.last_name.like(pattern))
        )

    def find_by_email(self, email: str) -> Staff:
        """Return the staff member with the given e-mail address."""
        return self._fetch_first(self._select(Staff.email == email))

    def find_by_username(self, username: str) -> Staff:
        """Return the staff member with the given username."""
        return self._fetch_first(self._select(Staff.username == username))

    def find_by_store(self, store_id: int) -> List[Staff]:
        """Return the staff working at the given store."""
        return self._fetch_all(self._select(Staff.store_id == store_id))

    def _by_activity(self, active: bool) -> List[Staff]:
        return self._fetch_all(self._select(Staff.active == active))

    def find_active(self) -> List[Staff]:
        """Return active staff."""
        return self._by_activity(True)

    def find_inactive(self) -> List[Staff]:
        """Return inactive staff."""
        return self._by_activity(False)