"""Database layer for officeledger application."""

from officeledger.database.base import Database
from officeledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
