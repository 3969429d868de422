"""SQLAlchemy models, connection settings and repositories for a DVD rental database."""

__version__ = "0.1.0"

__all__ = [
    "entities",
    "repository",
    "pool",
    "actors",
    "categories",
    "customers",
    "films",
    "inventory",
    "payments",
    "rentals",
    "staff",
    "stores",
]