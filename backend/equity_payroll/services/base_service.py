"""
Base service class.
Services contain business logic and coordinate repositories within one session.
"""

from abc import ABC

from sqlalchemy.ext.asyncio import AsyncSession


class BaseService(ABC):
    """Base service class for all database-backed services."""

    def __init__(self, session: AsyncSession):
        self.session = session
