"""Queries on films."""

from __future__ import annotations

from typing import List

from dvdrental.entities import Film, film_actors
from dvdrental.repository import Repository


class FilmRepository(Repository[Film]):
    """Data access for films."""

    model = Film

    def find_by_title(self, title: str) -> List[Film]:
        """Return films whose title contains ``title``."""
        return self._fetch_all(self._select(Film.title.like(f"%{title}%")))

    def find_by_category(self, category_id: int) -> List[Film]:
        """Return films of the given category."""
        return self._fetch_all(self._select(Film.category_id == category_id))

    def find_by_actor(self, actor_id: int) -> List[Film]:
        """Return films the given actor appears in."""
        statement = self._select(film_actors.c.actor_id == actor_id).join(
            film_actors, film_actors.c.film_id == Film.film_id
        )
        return self._fetch_all(statement)

    def find_by_release_year(self, year: int) -> List[Film]:
        """Return films released in the given year."""
        return self._fetch_all(self._select(Film.release_year == year))