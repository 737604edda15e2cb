"""
Relational persistence.

Exports the declarative base and the Database component.
"""

from docqa.boundary.db.base import Base
from docqa.boundary.db.connection import Database

__all__ = ["Base", "Database"]
