"""Queries on actors."""

from __future__ import annotations

from typing import List

from sqlalchemy import or_

from dvdrental.entities import Actor, film_actors
from dvdrental.repository import Repository


class ActorRepository(Repository[Actor]):
    """Data access for actors."""

    model = Actor

    def find_by_name(self, name: str) -> List[Actor]:
        """Return actors whose first or last name contains ``name``."""
        columns = (Actor.first_name, Actor.last_name)
        return self._fetch_all(self._select(or_(*(c.like(f"%{name}%") for c in columns))))

    def find_by_film(self, film_id: int) -> List[Actor]:
        """Return the actors appearing in the given film."""
        statement = self._select(film_actors.c.film_id == film_id).join(
            film_actors, film_actors.c.actor_id == Actor.actor_id
        )
        return self._fetch_all(statement)