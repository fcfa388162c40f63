"""Database layer for brokerage."""

from brokerage.database.base import Database, UnitOfWork
from brokerage.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "UnitOfWork", "create_database", "create_sqlite_database"]
