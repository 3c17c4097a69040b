import logging

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

logger = logging.getLogger("usertodo")

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Store client owning the engine (connection pool) and session factory.

    Built once by the application root and handed to request handlers
    through ``app.state``; tests construct their own against a scratch
    database.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        is_sqlite = url.startswith("sqlite")
        # Only apply sqlite-specific connect_args when using sqlite
        connect_args = {"check_same_thread": False} if is_sqlite else {}
        # pool_pre_ping avoids handing out stale connections after a DB restart
        self.engine = create_engine(
            url,
            connect_args=connect_args,
            pool_pre_ping=True,
            **engine_kwargs,
        )
        if is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self):
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def init_schema(self) -> bool:
        """Create the users and todos tables if they do not exist yet.

        Startup must not be blocked by an unreachable store: failures are
        logged and reported through the return value, never raised.
        """
        # register the tables on Base.metadata
        from usertodo.models import todo, user  # noqa: F401

        try:
            Base.metadata.create_all(bind=self.engine, checkfirst=True)
        except Exception as exc:
            logger.error("Error creating table: %s", exc)
            return False
        return True

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    yield from request.app.state.database.session()
