from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from fastapi import Request
from typing import Generator
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class Database:
    """
    Persistence client: owns the engine, the session factory and the schema.

    Built once at process start and handed to ``create_app``; ``shutdown``
    releases the connection pool.
    """

    def __init__(self, url: str, create_tables: bool = True, **engine_kwargs):
        self.url = url
        self.create_tables = create_tables
        if url.startswith("sqlite"):
            connect_args = engine_kwargs.pop("connect_args", {})
            connect_args.setdefault("check_same_thread", False)
            engine_kwargs["connect_args"] = connect_args
        self.engine: Engine = create_engine(url, **engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init(self):
        # Import models so they are registered on Base.metadata
        from shop_api.db import models  # noqa: F401

        if self.create_tables:
            Base.metadata.create_all(bind=self.engine)
            logger.info("Tables ready on %s", self.engine.url.render_as_string(hide_password=True))

    def shutdown(self):
        self.engine.dispose()
        logger.info("Database engine disposed")

    def session(self) -> Generator[Session, None, None]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def ping(self):
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency function that yields database sessions
    """
    yield from request.app.state.database.session()
