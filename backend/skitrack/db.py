from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from skitrack.core.config import Settings

# SQLAlchemy Base class for models to inherit
Base = declarative_base()


def is_memory_sqlite(url: str) -> bool:
    u = make_url(url)
    return u.get_backend_name() == "sqlite" and u.database in (None, "", ":memory:")


def create_store(
    url: str,
    *,
    pool_size: int = 5,
    max_overflow: int = 10,
    enforce_foreign_keys: bool = False,
) -> Engine:
    """Create the pooled engine shared by every request.

    The engine is built once at startup and handed to handlers through
    `get_engine`; nothing in the package holds it globally.
    """
    kwargs: dict = {"pool_pre_ping": True}  # helps avoid stale connections

    if make_url(url).get_backend_name() == "sqlite":
        # Connections are checked out from FastAPI's worker threads
        kwargs["connect_args"] = {"check_same_thread": False}
        if is_memory_sqlite(url):
            # One shared connection, otherwise each checkout gets an empty db
            kwargs["poolclass"] = StaticPool
        else:
            kwargs["pool_size"] = pool_size
            kwargs["max_overflow"] = max_overflow
    else:
        kwargs["pool_size"] = pool_size
        kwargs["max_overflow"] = max_overflow

    engine = create_engine(url, **kwargs)

    if enforce_foreign_keys and engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_store_from_settings(settings: Settings) -> Engine:
    return create_store(
        settings.database_url,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        enforce_foreign_keys=settings.enforce_foreign_keys,
    )


# Dependencies we will use in FastAPI routes
def get_engine(request: Request) -> Engine:
    return request.app.state.engine


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
