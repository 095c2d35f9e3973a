"""Single entry point that dispatches named operations to resolvers."""
import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..dependencies import get_resolvers
from ..errors import ResolverError
from ..resolvers import OPERATIONS, Resolvers
from ..schemas import OperationRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["api"])


def format_error(message: str, operation: str, code: str) -> dict[str, Any]:
    return {
        "message": message,
        "path": [operation],
        "extensions": {"code": code},
    }


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic argument errors into one message."""

    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "variables"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


@router.post("/api")
async def execute_operation(
    request: OperationRequest,
    resolvers: Resolvers = Depends(get_resolvers),
) -> JSONResponse:
    """Run one query or mutation and return a data/errors envelope."""

    name = request.operation
    operation = OPERATIONS.get(name)
    if operation is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "data": None,
                "errors": [format_error(f"Unknown operation: {name}", name, "OPERATION_NOT_FOUND")],
            },
        )

    try:
        result = await operation(resolvers, request.variables)
    except ValidationError as exc:
        error = format_error(describe_validation_error(exc), name, "BAD_USER_INPUT")
    except ResolverError as exc:
        error = format_error(exc.message, name, "INTERNAL_SERVER_ERROR")
    else:
        return JSONResponse(content={"data": {name: jsonable_encoder(result)}})

    logger.debug("%s %s returned error: %s", operation.kind, name, error["message"])
    return JSONResponse(content={"data": {name: None}, "errors": [error]})
