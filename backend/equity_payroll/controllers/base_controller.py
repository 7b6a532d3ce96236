"""
Base controller class.
Controllers coordinate services for one request and return Pydantic schemas.
"""

from abc import ABC


class BaseController(ABC):
    """Base controller class for all controllers."""
    pass
