"""
SQLAlchemy 2.0 DeclarativeBase for the issue tracker schema.

All table models inherit from this Base. Constraint and index names follow
NAMING_CONVENTION so the DDL built from these models names them the same way
on every database.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for the users and issues table models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
