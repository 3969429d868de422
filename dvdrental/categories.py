"""Queries on film categories."""

from __future__ import annotations

from typing import List

from dvdrental.entities import Category
from dvdrental.repository import Repository


class CategoryRepository(Repository[Category]):
    """Data access for categories."""

    model = Category

    def find_by_name(self, name: str) -> List[Category]:
        """Return categories whose name contains ``name``."""
        return self._fetch_all(self._select(Category.name.like(f"%{name}%")))