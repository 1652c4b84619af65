"""
Database session and base configuration.
"""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from cryptopoll.core.config import settings


def build_engine(database_url: str, **kwargs) -> Engine:
    """
    Create an engine for the configured store.

    SQLite (including libsql/Turso, which takes the auth token) gets foreign
    keys enforced on every connection; other backends get a small
    pre-pinged pool.
    """
    connect_args = kwargs.pop("connect_args", {})

    if database_url.startswith("sqlite"):
        if "libsql" in database_url:
            if settings.DATABASE_AUTH_TOKEN:
                connect_args.setdefault("auth_token", settings.DATABASE_AUTH_TOKEN)
        else:
            connect_args.setdefault("check_same_thread", False)
        db_engine = create_engine(database_url, connect_args=connect_args, **kwargs)

        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return db_engine

    if settings.ENV == "production":
        # Serverless: no connection pooling
        return create_engine(
            database_url,
            poolclass=NullPool,
            pool_pre_ping=True,
            connect_args=connect_args,
            **kwargs,
        )

    return create_engine(
        database_url,
        pool_size=5,
        max_overflow=0,
        pool_pre_ping=True,
        pool_recycle=3600,
        connect_args=connect_args,
        **kwargs,
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Get database session, closed on every exit path."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
