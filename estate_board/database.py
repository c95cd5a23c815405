import sqlite3

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool


def make_engine(url: str, **kwargs) -> Engine:
    """Создаёт движок; для SQLite разрешает доступ из пула потоков FastAPI"""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        # In-memory база живёт в одном соединении
        if make_url(url).database in (None, "", ":memory:"):
            kwargs.setdefault("poolclass", StaticPool)
    return create_engine(url, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def _configure_sqlite(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        # SQLite не соблюдает ON DELETE CASCADE без этой прагмы
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        # Встроенный lower() в SQLite понижает регистр только для ASCII
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


Base = declarative_base()


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
