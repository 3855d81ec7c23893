"""Engine construction and session handling for the commerce database."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.commerce.runtime.config.config_data import ConfigData
from src.commerce.runtime.context import get_config

_POOL_GAUGES = {
    "size": "size",
    "checked_in": "checkedin",
    "checked_out": "checkedout",
    "overflow": "overflow",
}


def build_engine(config: ConfigData) -> Engine:
    """Create the engine for ``config.database``.

    SQLite gets a cross-thread connection and a lock timeout; server databases
    get the configured pool sizing and an application name for monitoring.
    """
    db = config.database
    options: dict[str, Any] = {"echo": db.echo, "pool_pre_ping": True}

    if db.is_sqlite:
        if config.app.environment == "production":
            logger.warning("SQLite is in use in production; PostgreSQL is recommended")
        options["connect_args"] = {"check_same_thread": False, "timeout": 20}
    else:
        options["connect_args"] = {
            "application_name": f"{config.app.name}-{config.app.environment}",
            "connect_timeout": 30,
        }
        options.update(
            pool_size=db.pool_size,
            max_overflow=db.max_overflow,
            pool_timeout=db.pool_timeout,
            pool_recycle=db.pool_recycle,
        )

    return create_engine(db.connection_string, **options)


class DbSessionService:
    """Owns the engine and hands out sessions to request handlers and scripts."""

    def __init__(self, engine: Engine | None = None):
        self._engine = engine or build_engine(get_config())
        logger.debug("Database engine ready: {}", self._engine.url.render_as_string())

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        # Rows stay readable after commit so routes can serialize them
        return Session(self._engine, expire_on_commit=False)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Commit on success, roll back and re-raise on error."""
        with self.get_session() as session:
            try:
                yield session
                session.commit()
            except Exception as exc:
                session.rollback()
                logger.bind(error_type=type(exc).__name__).error("Database transaction failed: {}", exc)
                raise

    def health_check(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as exc:
            logger.bind(error_type=type(exc).__name__).error("Database health check failed: {}", exc)
            return False
        return True

    def get_pool_status(self) -> dict[str, int]:
        """Connection pool gauges; pools without counters report zeros."""
        pool = self._engine.pool
        status = {}
        for name, attr in _POOL_GAUGES.items():
            gauge = getattr(pool, attr, None)
            status[name] = gauge() if callable(gauge) else 0
        return status
