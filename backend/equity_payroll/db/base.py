"""
SQLAlchemy declarative base and shared model mixins.
"""

from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


class TimestampMixin:
    """Adds created/updated timestamps maintained by the database."""

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())


class DeletableMixin:
    """
    Soft-delete support.

    A record is considered deleted once ``deleted_at`` is set. Queries that
    should hide deleted rows filter with ``Model.alive()``.
    """

    deleted_at = Column(DateTime, nullable=True, index=True)

    @classmethod
    def alive(cls):
        return cls.deleted_at.is_(None)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
