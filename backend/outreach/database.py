import logging

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from outreach.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()
    # Built-in lower() only folds ASCII; ILIKE compiles to lower() on both sides
    dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


def get_engine(database_url: str | None = None):
    url = database_url or settings.database_url
    if url.startswith("sqlite"):
        engine = create_engine(url, connect_args={"check_same_thread": False})
        event.listen(engine, "connect", _set_sqlite_pragmas)
    else:
        engine = create_engine(url, pool_pre_ping=True)
    return engine


class Store:
    """Handle on the document store shared by every request.

    Built once at startup and attached to ``app.state.store``; route handlers
    receive sessions from it through :func:`get_db`.
    """

    def __init__(self, engine):
        self.engine = engine
        self.session_factory = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    @classmethod
    def from_url(cls, database_url: str | None = None) -> "Store":
        return cls(get_engine(database_url))

    def init_schema(self) -> None:
        # Import so every table is registered on Base.metadata
        import outreach.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    store: Store | None = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    db = store.session()
    try:
        yield db
    finally:
        db.close()
