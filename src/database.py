"""Database configuration and session management."""

import logging
import threading
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.config import Settings, get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


class StoreHealth:
    """Process-wide health signal for the credential store.

    Pool-level failures (lost connections) are recorded here instead of
    terminating the process; the health endpoint reports them so the
    supervisor can restart the service.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._failure: str | None = None

    @property
    def healthy(self) -> bool:
        return self._failure is None

    @property
    def failure(self) -> str | None:
        return self._failure

    def mark_failed(self, reason: str) -> None:
        with self._lock:
            if self._failure is None:
                logger.warning(f"Credential store marked unhealthy: {reason}")
                self._failure = reason

    def reset(self) -> None:
        with self._lock:
            self._failure = None


store_health = StoreHealth()


def engine_options(settings: Settings) -> dict[str, Any]:
    """Pool and timeout options for the configured database backend."""
    if settings.database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}

    connect_args: dict[str, Any] = {"connect_timeout": settings.db_connect_timeout}
    if settings.db_statement_timeout_ms:
        connect_args["options"] = f"-c statement_timeout={settings.db_statement_timeout_ms}"

    return {
        "pool_pre_ping": True,
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_recycle": settings.db_pool_recycle,
        "connect_args": connect_args,
    }


def watch_engine(engine: Engine, health: StoreHealth) -> None:
    """Record disconnects raised by statements on the engine.

    Failed pre-ping checks are skipped: the pool replaces that connection and
    the checkout still succeeds.
    """

    @event.listens_for(engine, "handle_error")
    def _on_error(context) -> None:
        if context.is_pre_ping:
            return
        if context.is_disconnect:
            health.mark_failed(type(context.original_exception).__name__)


engine = create_engine(settings.database_url, **engine_options(settings))
watch_engine(engine, store_health)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
