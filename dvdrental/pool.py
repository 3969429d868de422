"""Connection settings and engine construction for the supported databases."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine


class DatabaseType(str, enum.Enum):
    """Database servers the package can connect to."""

    MYSQL = "MYSQL"
    POSTGRESQL = "POSTGRES"
    MSSQL = "MSSQL"


class ConfigError(ValueError):
    """Raised for invalid or unusable connection settings."""


_DRIVERS = {
    DatabaseType.MYSQL: "mysql+pymysql",
    DatabaseType.POSTGRESQL: "postgresql+psycopg2",
    DatabaseType.MSSQL: "mssql+pymssql",
}

_MIN_TIMEOUT = timedelta(seconds=3)


@dataclass
class ConnectionConfig:
    """Where and how to connect, and how large the connection pool may grow."""

    db_type: Union[DatabaseType, str] = ""
    host: str = ""
    port: int = 0
    username: str = ""
    password: str = ""
    db_name: str = ""
    timeout: timedelta = field(default_factory=timedelta)
    max_idle_conns: int = 0
    max_open_conns: int = 0

    def _kind(self) -> Optional[DatabaseType]:
        try:
            return DatabaseType(self.db_type)
        except ValueError:
            return None

    def _timeout_seconds(self) -> int:
        return int(self.timeout.total_seconds())

    def validate(self) -> "ConnectionConfig":
        """Check the settings and return them; raise ConfigError listing every problem."""
        problems: List[str] = []
        if not self.db_type:
            problems.append("db_type is required")
        elif self._kind() is None:
            allowed = " ".join(t.value for t in DatabaseType)
            problems.append(f"db_type must be one of {allowed}")
        for name in ("host", "username", "db_name"):
            if not getattr(self, name):
                problems.append(f"{name} is required")
        if self.timeout < _MIN_TIMEOUT:
            problems.append("timeout must be at least 3s")
        if self.max_idle_conns < 1:
            problems.append("max_idle_conns must be at least 1")
        if self.max_open_conns < 2:
            problems.append("max_open_conns must be at least 2")
        if problems:
            raise ConfigError("; ".join(problems))
        return self

    def dsn(self) -> str:
        """Return the driver connection string, or an empty string for an unknown type."""
        kind = self._kind()
        seconds = self._timeout_seconds()
        if kind is DatabaseType.MYSQL:
            return (
                f"{self.username}:{self.password}@tcp({self.host}:{self.port})/{self.db_name}"
                f"?parseTime=true&timeout={seconds}s"
            )
        if kind is DatabaseType.POSTGRESQL:
            return (
                f"user={self.username} password={self.password} host={self.host} "
                f"port={self.port} dbname={self.db_name} sslmode=disable "
                f"connect_timeout={seconds}"
            )
        if kind is DatabaseType.MSSQL:
            return (
                f"sqlserver://{self.username}:{self.password}@{self.host}:{self.port}"
                f"?database={self.db_name}&connectTimeout={seconds}s&encrypt=disable"
            )
        return ""

    def url(self) -> URL:
        """Return the SQLAlchemy URL for these settings."""
        kind = self._kind()
        if kind is None:
            raise ConfigError(f"unsupported database type: {self.db_type}")
        return URL.create(
            _DRIVERS[kind],
            username=self.username or None,
            password=self.password or None,
            host=self.host or None,
            port=self.port or None,
            database=self.db_name or None,
        )

    def _connect_args(self, kind: DatabaseType) -> Dict[str, Any]:
        seconds = self._timeout_seconds()
        if kind is DatabaseType.MSSQL:
            return {"login_timeout": seconds}
        return {"connect_timeout": seconds}

    def pool(self) -> Engine:
        """Open a pooled engine, check that the server answers, and return it."""
        if not self.dsn():
            raise ConfigError("dsn is empty")
        kind = self._kind()
        if kind is None:
            raise ConfigError(f"unsupported database type: {self.db_type}")

        idle = max(self.max_idle_conns, 0)
        if self.max_open_conns > 0:
            idle = min(idle, self.max_open_conns)
            overflow = self.max_open_conns - idle
        else:
            overflow = -1

        engine = create_engine(
            self.url(),
            pool_size=idle,
            max_overflow=overflow,
            connect_args=self._connect_args(kind),
        )
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except BaseException:
            engine.dispose()
            raise
        return engine