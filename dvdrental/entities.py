"""Mapped tables of the DVD rental schema."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Numeric,
    SmallInteger,
    String,
    Table,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    declared_attr,
    mapped_column,
    relationship,
    synonym,
)


def _now() -> datetime:
    return datetime.now()


def _text(**kwargs):
    return mapped_column(String(255), **kwargs)


def _key():
    return mapped_column(primary_key=True, autoincrement=True)


def _reference(target: str):
    return mapped_column(ForeignKey(target))


class Base(DeclarativeBase):
    """Declarative base for every table of the schema."""


class SoftDeleteModel(Base):
    """Bookkeeping columns shared by all entities; rows are deleted softly."""

    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(DateTime, default=_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=_now, onupdate=_now)
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime, index=True)


class _Named:
    first_name: Mapped[str] = _text()
    last_name: Mapped[str] = _text()


class _Located:
    address: Mapped[str] = _text()
    address2: Mapped[Optional[str]] = _text(default="")
    district: Mapped[str] = _text()
    city: Mapped[str] = _text()
    country: Mapped[str] = _text()
    postal_code: Mapped[str] = _text()
    phone: Mapped[str] = _text()


class _Account(_Named, _Located):
    email: Mapped[str] = _text(unique=True)
    active: Mapped[bool] = mapped_column(Boolean, default=True)


class _StoreMember:
    @declared_attr
    def store_id(cls):
        return _reference("store.store_id")

    @declared_attr
    def store(cls):
        return relationship("Store")


class _Transaction:
    @declared_attr
    def customer_id(cls):
        return _reference("customer.customer_id")

    @declared_attr
    def staff_id(cls):
        return _reference("staff.staff_id")

    @declared_attr
    def customer(cls):
        return relationship("Customer")

    @declared_attr
    def staff(cls):
        return relationship("Staff")


film_actors = Table(
    "film_actors",
    Base.metadata,
    Column("film_id", ForeignKey("film.film_id"), primary_key=True),
    Column("actor_id", ForeignKey("actor.actor_id"), primary_key=True),
)


class Store(_Located, SoftDeleteModel):
    """A store of the rental chain."""

    __tablename__ = "store"

    store_id: Mapped[int] = _key()
    id: Mapped[int] = synonym("store_id")
    store_name: Mapped[str] = _text()


class Actor(_Named, SoftDeleteModel):
    """An actor appearing in films."""

    __tablename__ = "actor"

    actor_id: Mapped[int] = _key()
    id: Mapped[int] = synonym("actor_id")


class Category(SoftDeleteModel):
    """A film genre."""

    __tablename__ = "category"

    category_id: Mapped[int] = _key()
    id: Mapped[int] = synonym("category_id")
    name: Mapped[str] = _text(unique=True)


class Customer(_Account, _StoreMember, SoftDeleteModel):
    """A customer registered at a store."""

    __tablename__ = "customer"

    customer_id: Mapped[int] = _key()
    id: Mapped[int] = synonym("customer_id")
    create_date: Mapped[date] = mapped_column(Date, default=date.today)


class Film(SoftDeleteModel):
    """A film in the catalogue."""

    __tablename__ = "film"

    film_id: Mapped[int] = _key()
    id: Mapped[int] = synonym("film_id")
    title: Mapped[str] = _text()
    release_year: Mapped[int] = mapped_column(SmallInteger)
    length: Mapped[int] = mapped_column(SmallInteger)
    category_id: Mapped[int] = _reference("category.category_id")

    category: Mapped[Category] = relationship()
    actors: Mapped[List[Actor]] = relationship(secondary=film_actors)


class Staff(_Account, _StoreMember, SoftDeleteModel):
    """An employee working at a store."""

    __tablename__ = "staff"

    staff_id: Mapped[int] = _key()
    id: Mapped[int] = synonym("staff_id")
    username: Mapped[str] = _text(unique=True)
    last_update: Mapped[datetime] = mapped_column(DateTime, default=_now)


class Inventory(_StoreMember, SoftDeleteModel):
    """One copy of a film held by a store."""

    __tablename__ = "inventory"

    inventory_id: Mapped[int] = _key()
    id: Mapped[int] = synonym("inventory_id")
    film_id: Mapped[int] = _reference("film.film_id")

    film: Mapped[Film] = relationship()


class Rental(_Transaction, SoftDeleteModel):
    """A rental of an inventory item by a customer."""

    __tablename__ = "rental"

    rental_id: Mapped[int] = _key()
    id: Mapped[int] = synonym("rental_id")
    rental_date: Mapped[datetime] = mapped_column(DateTime)
    inventory_id: Mapped[int] = _reference("inventory.inventory_id")
    return_date: Mapped[Optional[datetime]] = mapped_column(DateTime)

    inventory: Mapped[Inventory] = relationship()
    payment: Mapped[Optional[Payment]] = relationship(back_populates="rental")


class Payment(_Transaction, SoftDeleteModel):
    """The payment settling one rental."""

    __tablename__ = "payment"

    payment_id: Mapped[int] = _key()
    id: Mapped[int] = synonym("payment_id")
    rental_id: Mapped[int] = mapped_column(ForeignKey("rental.rental_id"), unique=True)
    amount: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False))
    payment_date: Mapped[datetime] = mapped_column(DateTime)

    rental: Mapped[Rental] = relationship(back_populates="payment")


def create_schema(engine: Engine) -> None:
    """Create every table of the schema that does not exist yet."""
    Base.metadata.create_all(engine)