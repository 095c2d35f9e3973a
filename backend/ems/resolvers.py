"""
Resolver layer: one coroutine per named API operation.

``Resolvers`` receives its collaborators (record stores, media uploader,
settings, and the caller's decoded token) when it is built, so each
request gets an isolated instance.  ``OPERATIONS`` maps every public
operation name to its kind, argument model and resolver method.
"""
from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Awaitable, Callable

from pydantic import BaseModel

from .config import Settings
from .errors import (
    DuplicateRecord,
    RecordNotFound,
    ResolverError,
    UploadError,
    ValidationFailed,
)
from .media import MediaUploader
from .models import GENDERS, Account, Employee
from .models.employee import MIN_SALARY
from .schemas import (
    AccountRead,
    AuthPayload,
    DeleteResponse,
    EmployeeCreate,
    EmployeeIdArgs,
    EmployeeRead,
    EmployeeUpdate,
    LoginArgs,
    NoArguments,
    SearchArgs,
    SignupArgs,
    TokenData,
)
from .security import issue_token
from .store import RecordStore
from .validators import validate_employee_input, validate_signup_input

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username/email or password"
DUPLICATE_EMPLOYEE_EMAIL = "An employee with this email already exists"


def resolver_boundary(prefix: str = "") -> Callable:
    """Re-raise anything a resolver throws as a flat ResolverError."""

    def decorator(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except ResolverError as exc:
                logger.info("%s failed: %s", func.__name__, exc.message)
                if prefix:
                    raise ResolverError(prefix + exc.message) from exc
                raise
            except Exception as exc:
                logger.info("%s failed: %s", func.__name__, exc)
                raise ResolverError(prefix + str(exc)) from exc

        return wrapper

    return decorator


def parse_date(value: str) -> date:
    """Parse an ISO-8601 date or date-time string into a calendar date."""

    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError as exc:
        raise ValidationFailed([f"Invalid date of joining: {value}"]) from exc


def normalize_email(value: str) -> str:
    """Return the form an email is stored and compared in."""

    return value.strip().lower()


def shape_employee(employee: Employee) -> EmployeeRead:
    return EmployeeRead.model_validate(employee)


class Resolvers:
    """Operation implementations bound to one request's collaborators."""

    def __init__(
        self,
        accounts: RecordStore[Account],
        employees: RecordStore[Employee],
        uploader: MediaUploader,
        settings: Settings,
        current_account: TokenData | None = None,
    ) -> None:
        self.accounts = accounts
        self.employees = employees
        self.uploader = uploader
        self.settings = settings
        # Decoded caller identity; exposed, not enforced
        self.current_account = current_account

    # ---- Queries ----

    @resolver_boundary()
    async def login(self, args: LoginArgs) -> AuthPayload:
        """Authenticate by username or email and issue a session token."""

        account = await self.accounts.find_one_by_either(
            username=args.usernameOrEmail,
            email=args.usernameOrEmail.lower(),
        )
        # Same message for unknown account and wrong password
        if account is None or not account.compare_password(args.password):
            raise ResolverError(INVALID_CREDENTIALS)

        token = issue_token(account, self.settings)
        return AuthPayload(token=token, user=AccountRead.model_validate(account))

    @resolver_boundary(prefix="Failed to fetch employees: ")
    async def get_all_employees(self, args: NoArguments) -> list[EmployeeRead]:
        return [shape_employee(emp) for emp in await self.employees.find_all()]

    @resolver_boundary()
    async def search_employee_by_id(self, args: EmployeeIdArgs) -> EmployeeRead:
        employee = await self.employees.find_by_id(args.eid)
        if employee is None:
            raise RecordNotFound(f"Employee with ID {args.eid} not found")
        return shape_employee(employee)

    @resolver_boundary()
    async def search_employee_by_designation_or_department(
        self, args: SearchArgs
    ) -> list[EmployeeRead]:
        """Substring search on designation and/or department (OR when both given)."""

        if not args.designation and not args.department:
            raise ValidationFailed(
                ["Please provide at least a designation or department to search"]
            )

        patterns = {}
        if args.designation:
            patterns["designation"] = args.designation
        if args.department:
            patterns["department"] = args.department

        return [shape_employee(emp) for emp in await self.employees.find_with_filter(**patterns)]

    # ---- Mutations ----

    @resolver_boundary()
    async def signup(self, args: SignupArgs) -> AccountRead:
        errors = validate_signup_input(args.username, args.email, args.password)
        if errors:
            raise ValidationFailed(errors)

        email = normalize_email(args.email)
        existing = await self.accounts.find_one_by_either(username=args.username, email=email)
        if existing is not None:
            raise DuplicateRecord("Username or email already exists")

        account = Account(username=args.username, email=email)
        account.set_password(args.password)
        account = await self.accounts.insert(account)
        logger.info("Created account %s (%s)", account.username, account.id)
        return AccountRead.model_validate(account)

    @resolver_boundary()
    async def add_employee(self, args: EmployeeCreate) -> EmployeeRead:
        errors = validate_employee_input(args.model_dump())
        if errors:
            raise ValidationFailed(errors)

        email = normalize_email(args.email)
        if await self.employees.find_one_by_either(email=email) is not None:
            raise DuplicateRecord(DUPLICATE_EMPLOYEE_EMAIL)

        date_of_joining = parse_date(args.date_of_joining)

        photo_url = None
        if args.employee_photo:
            try:
                photo_url = await self.uploader.upload(args.employee_photo)
            except UploadError as exc:
                # Keep the raw value so a broken upload never blocks creation
                logger.warning("Photo upload failed on create, storing input as-is: %s", exc)
                photo_url = args.employee_photo

        employee = Employee(
            first_name=args.first_name,
            last_name=args.last_name,
            email=email,
            gender=args.gender,
            designation=args.designation,
            salary=args.salary,
            date_of_joining=date_of_joining,
            department=args.department,
            employee_photo=photo_url,
        )
        employee = await self.employees.insert(employee)
        logger.info("Added employee %s", employee.id)
        return shape_employee(employee)

    @resolver_boundary()
    async def update_employee(self, args: EmployeeUpdate) -> EmployeeRead:
        """Apply a partial update; only supplied fields change."""

        eid = args.eid
        if await self.employees.find_by_id(eid) is None:
            raise RecordNotFound(f"Employee with ID {eid} not found")

        changes = args.changes()

        if changes.get("email"):
            email = normalize_email(changes["email"])
            duplicate = await self.employees.find_one_by_either(exclude_id=eid, email=email)
            if duplicate is not None:
                raise DuplicateRecord(DUPLICATE_EMPLOYEE_EMAIL)
            changes["email"] = email

        if changes.get("gender") and changes["gender"] not in GENDERS:
            raise ValidationFailed(["Gender must be Male, Female, or Other"])

        if "salary" in changes and changes["salary"] < MIN_SALARY:
            raise ValidationFailed([f"Salary must be at least {MIN_SALARY}"])

        if "date_of_joining" in changes:
            changes["date_of_joining"] = parse_date(changes["date_of_joining"])

        if changes.get("employee_photo"):
            try:
                changes["employee_photo"] = await self.uploader.upload(changes["employee_photo"])
            except UploadError as exc:
                # Previous photo stays in place
                logger.warning("Photo upload failed on update of %s, keeping old photo: %s", eid, exc)
                del changes["employee_photo"]

        employee = await self.employees.update_by_id(eid, changes)
        if employee is None:
            raise RecordNotFound(f"Employee with ID {eid} not found")
        logger.info("Updated employee %s (%s)", eid, ", ".join(sorted(changes)) or "no fields")
        return shape_employee(employee)

    @resolver_boundary()
    async def delete_employee(self, args: EmployeeIdArgs) -> DeleteResponse:
        employee = await self.employees.delete_by_id(args.eid)
        if employee is None:
            raise RecordNotFound(f"Employee with ID {args.eid} not found")
        logger.info("Deleted employee %s", employee.id)
        return DeleteResponse(message="Employee deleted successfully", id=employee.id)


@dataclass(frozen=True)
class Operation:
    """A named entry point of the API."""

    kind: str
    arguments: type[BaseModel]
    resolve: Callable[[Resolvers, Any], Awaitable[Any]]

    async def __call__(self, resolvers: Resolvers, variables: dict[str, Any]) -> Any:
        args = self.arguments.model_validate(variables)
        return await self.resolve(resolvers, args)


OPERATIONS: dict[str, Operation] = {
    "login": Operation("query", LoginArgs, Resolvers.login),
    "getAllEmployees": Operation("query", NoArguments, Resolvers.get_all_employees),
    "searchEmployeeById": Operation("query", EmployeeIdArgs, Resolvers.search_employee_by_id),
    "searchEmployeeByDesignationOrDepartment": Operation(
        "query", SearchArgs, Resolvers.search_employee_by_designation_or_department
    ),
    "signup": Operation("mutation", SignupArgs, Resolvers.signup),
    "addEmployee": Operation("mutation", EmployeeCreate, Resolvers.add_employee),
    "updateEmployee": Operation("mutation", EmployeeUpdate, Resolvers.update_employee),
    "deleteEmployee": Operation("mutation", EmployeeIdArgs, Resolvers.delete_employee),
}
