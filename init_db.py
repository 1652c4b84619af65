"""
Script to initialize the database tables.
"""
from cryptopoll.db.base import engine
from cryptopoll.db.init_db import init_db


def init() -> None:
    """Initialize database."""
    print("Creating database tables...")
    tables = init_db(engine)
    print(f"✅ Tables ready: {', '.join(tables)}")


if __name__ == "__main__":
    init()
