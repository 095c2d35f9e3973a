"""Pydantic schemas for operation arguments and shaped results."""
from datetime import date, datetime, timedelta, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TokenData(BaseModel):
    """Claims encoded into session tokens."""

    id: str
    username: str
    email: str


class AccountRead(BaseModel):
    """Public representation of an account."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AuthPayload(BaseModel):
    """Result of a successful login."""

    token: str
    user: AccountRead


class EmployeeRead(BaseModel):
    """Employee representation returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    last_name: str
    email: str
    gender: str
    designation: str
    salary: float
    date_of_joining: date
    department: str
    employee_photo: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DeleteResponse(BaseModel):
    """Confirmation returned after an employee is removed."""

    message: str
    id: str


class NoArguments(BaseModel):
    """Argument model for operations that take no input."""


class LoginArgs(BaseModel):
    usernameOrEmail: str
    password: str


class SignupArgs(BaseModel):
    username: str
    email: str
    password: str


class EmployeeIdArgs(BaseModel):
    eid: str


class SearchArgs(BaseModel):
    designation: str | None = None
    department: str | None = None


class EmployeeCreate(BaseModel):
    """Arguments accepted by addEmployee."""

    first_name: str
    last_name: str
    email: str
    gender: str
    designation: str
    salary: float
    date_of_joining: str
    department: str
    employee_photo: str | None = None


class EmployeeUpdate(BaseModel):
    """Partial employee update; an omitted or null field means "no change"."""

    eid: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    gender: str | None = None
    designation: str | None = None
    salary: float | None = None
    date_of_joining: str | None = None
    department: str | None = None
    employee_photo: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller supplied."""

        return self.model_dump(exclude={"eid"}, exclude_none=True)


class OperationRequest(BaseModel):
    """Envelope for a single named operation."""

    operation: str
    variables: dict[str, Any] = Field(default_factory=dict)


def compute_expiry(minutes: int) -> datetime:
    """Return an absolute expiration timestamp for tokens."""

    return datetime.now(timezone.utc) + timedelta(minutes=minutes)
