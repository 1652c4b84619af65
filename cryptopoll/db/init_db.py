"""
Database initialization.
"""
from typing import List

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from cryptopoll.models import Base


def init_db(bind: Engine) -> List[str]:
    """
    Create any missing survey tables.

    Args:
        bind: Engine to create the tables on

    Returns:
        Names of the tables present afterwards
    """
    Base.metadata.create_all(bind=bind)
    return sorted(inspect(bind).get_table_names())
