"""Queries on inventory items."""

from __future__ import annotations

from typing import Any, List

from sqlalchemy import and_

from dvdrental.entities import Inventory, Rental
from dvdrental.repository import Repository


class InventoryRepository(Repository[Inventory]):
    """Data access for inventory items."""

    model = Inventory

    def find_by_film(self, film_id: int) -> List[Inventory]:
        """Return copies of the given film."""
        return self._fetch_all(self._select(Inventory.film_id == film_id))

    def find_by_store(self, store_id: int) -> List[Inventory]:
        """Return copies held by the given store."""
        return self._fetch_all(self._select(Inventory.store_id == store_id))

    def find_by_film_and_store(self, film_id: int, store_id: int) -> List[Inventory]:
        """Return copies of the given film held by the given store."""
        return self._fetch_all(
            self._select(Inventory.film_id == film_id, Inventory.store_id == store_id)
        )

    def _available(self, *criteria: Any) -> List[Inventory]:
        statement = self._select(Rental.rental_id.is_(None), *criteria).outerjoin(
            Rental,
            and_(
                Rental.inventory_id == Inventory.inventory_id,
                Rental.return_date.is_(None),
            ),
        )
        return self._fetch_all(statement)

    def find_available(self) -> List[Inventory]:
        """Return copies not currently out on rental."""
        return self._available()

    def find_available_by_film(self, film_id: int) -> List[Inventory]:
        """Return copies of the given film not currently out on rental."""
        return self._available(Inventory.film_id == film_id)

    def find_available_by_store(self, store_id: int) -> List[Inventory]:
        """Return copies at the given store not currently out on rental."""
        return self._available(Inventory.store_id == store_id)