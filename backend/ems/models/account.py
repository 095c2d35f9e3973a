"""Account model for authenticated identities."""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ..security import hash_password, verify_password
from .base import Base, RecordMixin


class Account(RecordMixin, Base):
    """Login identity; username and email are unique across accounts."""

    __tablename__ = "accounts"

    username: Mapped[str] = mapped_column(String, unique=True, index=True)
    email: Mapped[str] = mapped_column(String, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String)

    def set_password(self, password: str) -> None:
        self.password_hash = hash_password(password)

    def compare_password(self, password: str) -> bool:
        """Check a candidate password against the stored hash."""
        return verify_password(password, self.password_hash)
