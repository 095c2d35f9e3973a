"""Employee model for the backend API."""
from datetime import date

from sqlalchemy import CheckConstraint, Date, Float, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from .base import Base, RecordMixin

GENDERS = ("Male", "Female", "Other")
MIN_SALARY = 1000

REQUIRED_TEXT = {
    "first_name": "First name",
    "last_name": "Last name",
    "email": "Email",
    "designation": "Designation",
    "department": "Department",
}


class Employee(RecordMixin, Base):
    """Personnel record managed through the employee operations."""

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String)
    last_name: Mapped[str] = mapped_column(String)
    email: Mapped[str] = mapped_column(String, unique=True, index=True)
    gender: Mapped[str] = mapped_column(String(16))
    designation: Mapped[str] = mapped_column(String, index=True)
    salary: Mapped[float] = mapped_column(Float)
    date_of_joining: Mapped[date] = mapped_column(Date)
    department: Mapped[str] = mapped_column(String, index=True)
    employee_photo: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (
        CheckConstraint(f"salary >= {MIN_SALARY}", name="salary_minimum"),
        CheckConstraint(
            "gender IN ({})".format(", ".join(f"'{g}'" for g in GENDERS)),
            name="gender_allowed",
        ),
    )

    @validates(*REQUIRED_TEXT)
    def _validate_text(self, key: str, value: str | None) -> str:
        # Stored text is trimmed and may not be blank
        if value is None or not value.strip():
            raise ValueError(f"{REQUIRED_TEXT[key]} is required")
        return value.strip()

    @validates("gender")
    def _validate_gender(self, key: str, value: str) -> str:
        if value not in GENDERS:
            raise ValueError("Gender must be Male, Female, or Other")
        return value

    @validates("salary")
    def _validate_salary(self, key: str, value: float) -> float:
        if value is None or value < MIN_SALARY:
            raise ValueError(f"Salary must be at least {MIN_SALARY}")
        return value
