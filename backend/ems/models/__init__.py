"""SQLAlchemy models exposed by the backend."""
from .account import Account
from .base import Base
from .employee import GENDERS, Employee

__all__ = ["Account", "Base", "Employee", "GENDERS"]
