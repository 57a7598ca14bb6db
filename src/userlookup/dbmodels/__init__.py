"""
Database models for the user lookup service (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention so that
constraint names stay stable across SQLite and PostgreSQL.
"""

from sqlalchemy import Integer, MetaData, PrimaryKeyConstraint, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "User"
    __table_args__ = (PrimaryKeyConstraint("id", name="User_pkey"),)

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)


__all__ = ["Base", "Users"]
