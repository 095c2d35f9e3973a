"""Input validation for signup and employee payloads.

Each function returns every violated rule as a human-readable message,
in a fixed order; an empty list means the input is valid.
"""
import re
from typing import Any, Mapping

from .models.employee import GENDERS, MIN_SALARY

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


def _check_email(email: str | None, errors: list[str]) -> None:
    if _blank(email):
        errors.append("Email is required")
    elif not EMAIL_PATTERN.fullmatch(email):
        errors.append("Please enter a valid email address")


def validate_signup_input(
    username: str | None, email: str | None, password: str | None
) -> list[str]:
    """Validate signup credentials."""
    errors: list[str] = []

    if _blank(username):
        errors.append("Username is required")
    elif len(username.strip()) < 3:
        errors.append("Username must be at least 3 characters")

    _check_email(email, errors)

    if not password:
        errors.append("Password is required")
    elif len(password) < 6:
        errors.append("Password must be at least 6 characters")

    return errors


def validate_employee_input(data: Mapping[str, Any]) -> list[str]:
    """Validate a complete employee payload (as used by addEmployee)."""
    errors: list[str] = []

    if _blank(data.get("first_name")):
        errors.append("First name is required")
    if _blank(data.get("last_name")):
        errors.append("Last name is required")

    _check_email(data.get("email"), errors)

    gender = data.get("gender")
    if not gender:
        errors.append("Gender is required")
    elif gender not in GENDERS:
        errors.append("Gender must be Male, Female, or Other")

    if _blank(data.get("designation")):
        errors.append("Designation is required")

    salary = data.get("salary")
    if salary is None:
        errors.append("Salary is required")
    elif salary < MIN_SALARY:
        errors.append(f"Salary must be at least {MIN_SALARY}")

    # Presence only; parsing happens when the record is built
    if not data.get("date_of_joining"):
        errors.append("Date of joining is required")

    if _blank(data.get("department")):
        errors.append("Department is required")

    return errors
