"""Queries on stores."""

from __future__ import annotations

from typing import List

from dvdrental.entities import Store
from dvdrental.repository import Repository


class StoreRepository(Repository[Store]):
    """Data access for stores."""

    model = Store

    def find_by_name(self, name: str) -> List[Store]:
        """Return stores whose name contains ``name``."""
        return self._fetch_all(self._select(Store.store_name.like(f"%{name}%")))

    def find_by_city(self, city: str) -> List[Store]:
        """Return stores whose city contains ``city``."""
        return self._fetch_all(self._select(Store.city.like(f"%{city}%")))

    def find_by_country(self, country: str) -> List[Store]:
        """Return stores whose country contains ``country``."""
        return self._fetch_all(self._select(Store.country.like(f"%{country}%")))