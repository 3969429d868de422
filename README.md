# dvdrental

SQLAlchemy models and repositories for the classic DVD rental schema:
actors, categories, films, stores, staff, customers, inventory, rentals
and payments.

Records are soft-deleted: deleting sets `deleted_at`, and every query
leaves out rows that carry it.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Connecting

`dvdrental.pool.ConnectionConfig` holds the settings for a MySQL,
PostgreSQL or SQL Server database, chosen with `DatabaseType.MYSQL`,
`DatabaseType.POSTGRESQL` or `DatabaseType.MSSQL` (or the strings
`"MYSQL"`, `"POSTGRES"`, `"MSSQL"`).

- `validate()` checks the settings and returns the config, or raises
  `ConfigError` listing every problem: a known database type, host,
  username and database name are required, the timeout must be at least
  3 seconds, `max_idle_conns` at least 1 and `max_open_conns` at least 2.
- `dsn()` returns the driver connection string for the database type, or
  an empty string when the type is not known.
- `url()` returns the SQLAlchemy `URL`.
- `pool()` creates an engine sized from `max_idle_conns` and
  `max_open_conns`, runs `SELECT 1` to check the server answers, and
  returns the engine.

```python
from datetime import timedelta

from dvdrental.pool import ConnectionConfig, DatabaseType

password = "password"
config = ConnectionConfig(
    db_type=DatabaseType.POSTGRESQL,
    host="localhost",
    port=5432,
    username="postgres",
    password=password,
    db_name="dvdrental",
    timeout=timedelta(seconds=3),
    max_idle_conns=5,
    max_open_conns=10,
)
config.validate()      # raises ConfigError on bad settings
print(config.dsn())    # user=postgres password=... host=localhost port=5432 ...
engine = config.pool() # a connected SQLAlchemy engine
```

The engine uses the `mysql+pymysql`, `postgresql+psycopg2` or
`mssql+pymssql` dialect; the matching driver is not a dependency of this
package and must be installed alongside it.

## Schema

The mapped classes live in `dvdrental.entities`: `Actor`, `Category`,
`Customer`, `Film`, `Inventory`, `Payment`, `Rental`, `Staff` and `Store`,
all built on `SoftDeleteModel` (with `created_at`, `updated_at` and
`deleted_at` columns) and `Base`. Each has an `id` synonym for its own key
column, such as `actor_id`. Films and actors are linked through the
`film_actors` table.

```python
from dvdrental.entities import create_schema

create_schema(engine)  # creates any tables that do not exist yet
```

## Repositories

Each repository wraps a SQLAlchemy `Session`. All of them share the basic
operations of `dvdrental.repository.Repository`:

- `create(entity)` inserts and commits, returning the entity;
- `find_by_id(id)` returns the live entity, or raises `RecordNotFoundError`;
- `find_all()` returns every live entity;
- `update(entity)` merges and commits, returning the persistent instance;
- `delete(entity)` and `delete_by_id(id)` soft-delete and commit.

```python
from sqlalchemy.orm import Session

from dvdrental.entities import Actor
from dvdrental.actors import ActorRepository
from dvdrental.films import FilmRepository
from dvdrental.inventory import InventoryRepository
from dvdrental.payments import PaymentRepository
from dvdrental.rentals import RentalRepository

with Session(engine) as session:
    actors = ActorRepository(session)
    actors.create(Actor(first_name="John", last_name="Doe"))
    johns = actors.find_by_name("John")

    films = FilmRepository(session).find_by_release_year(1999)
    free_copies = InventoryRepository(session).find_available_by_store(1)
    late = RentalRepository(session).find_overdue(7)
    spent = PaymentRepository(session).total_by_customer(1)
```

The lookups each repository adds:

| Repository | Module | Lookups |
| --- | --- | --- |
| `ActorRepository` | `dvdrental.actors` | `find_by_name`, `find_by_film` |
| `CategoryRepository` | `dvdrental.categories` | `find_by_name` |
| `CustomerRepository` | `dvdrental.customers` | `find_by_name`, `find_by_email`, `find_by_store`, `find_active`, `find_inactive` |
| `FilmRepository` | `dvdrental.films` | `find_by_title`, `find_by_category`, `find_by_actor`, `find_by_release_year` |
| `InventoryRepository` | `dvdrental.inventory` | `find_by_film`, `find_by_store`, `find_by_film_and_store`, `find_available`, `find_available_by_film`, `find_available_by_store` |
| `PaymentRepository` | `dvdrental.payments` | `find_by_customer`, `find_by_staff`, `find_by_rental`, `find_by_date_range`, `find_by_amount_range`, `total_by_customer`, `total_by_store` |
| `RentalRepository` | `dvdrental.rentals` | `find_by_customer`, `find_by_staff`, `find_by_inventory`, `find_by_date_range`, `find_overdue`, `find_returned`, `find_not_returned` |
| `StaffRepository` | `dvdrental.staff` | `find_by_name`, `find_by_email`, `find_by_username`, `find_by_store`, `find_active`, `find_inactive` |
| `StoreRepository` | `dvdrental.stores` | `find_by_name`, `find_by_city`, `find_by_country` |

Name, title, city and country lookups match substrings. Single-result
lookups (`find_by_email`, `find_by_username`, `find_by_rental`) raise
`RecordNotFoundError` when nothing matches. Inventory counts as available
when it has no rental without a return date. The payment totals return
`0.0` when there are no payments.

## What this package does not do

It has no command-line program and no schema migrations: `create_schema`
only creates missing tables and never alters existing ones. It does not
load sample data.