"""Generic data access for soft-deletable entities."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Generic, Iterator, List, TypeVar

from sqlalchemy import Select, inspect, select, update
from sqlalchemy.orm import Session

from dvdrental.entities import SoftDeleteModel

T = TypeVar("T", bound=SoftDeleteModel)


class RecordNotFoundError(LookupError):
    """Raised when a lookup matches no live row."""

    def __init__(self, message: str = "record not found") -> None:
        super().__init__(message)


class Repository(Generic[T]):
    """Create, read, update and soft-delete rows of one mapped class.

    Subclasses set ``model`` to the mapped class they serve.
    """

    model: type[T]

    def __init__(self, session: Session) -> None:
        if getattr(type(self), "model", None) is None:
            raise TypeError(f"{type(self).__name__} must set a model class")
        self.session = session

    @property
    def _key(self) -> Any:
        return inspect(self.model).primary_key[0]

    def _select(self, *criteria: Any) -> Select:
        return select(self.model).where(self.model.deleted_at.is_(None), *criteria)

    def _fetch_all(self, statement: Select) -> List[T]:
        return list(self.session.scalars(statement))

    def _fetch_first(self, statement: Select) -> T:
        found = self.session.scalars(statement.order_by(self._key).limit(1)).first()
        if found is None:
            raise RecordNotFoundError()
        return found

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        try:
            yield self.session
            self.session.commit()
        except BaseException:
            self.session.rollback()
            raise

    def _soft_delete(self, ident: Any) -> None:
        statement = (
            update(self.model)
            .where(self._key == ident, self.model.deleted_at.is_(None))
            .values(deleted_at=datetime.now())
        )
        with self._transaction() as session:
            session.execute(statement)

    def create(self, entity: T) -> T:
        """Insert a new entity and return it with its key assigned."""
        with self._transaction() as session:
            session.add(entity)
        return entity

    def find_by_id(self, id: Any) -> T:
        """Return the live entity with the given key."""
        return self._fetch_first(self._select(self._key == id))

    def find_all(self) -> List[T]:
        """Return every live entity."""
        return self._fetch_all(self._select())

    def update(self, entity: T) -> T:
        """Save the entity's state and return the persistent instance."""
        with self._transaction() as session:
            merged = session.merge(entity)
        return merged

    def delete(self, entity: T) -> None:
        """Soft-delete the given entity."""
        ident = inspect(self.model).primary_key_from_instance(entity)[0]
        if ident is None:
            raise ValueError("cannot delete an entity without a primary key")
        self._soft_delete(ident)

    def delete_by_id(self, id: Any) -> None:
        """Soft-delete the entity with the given key."""
        self._soft_delete(id)