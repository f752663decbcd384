"""Domain error taxonomy and the centralized exception handlers.

Every error leaves the API as ``{"success": false, "message": ...}``;
validation failures additionally carry ``errors``, a list of
``{field: message}`` pairs.
"""
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(HTTPException):
    """Base for errors the handlers expect and translate to a status code."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        super().__init__(status_code=self.status_code, detail=message or self.default_message)


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized"


class OwnershipError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized access"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    """Duplicate email. Reported as 400 to match the rest of the auth API."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email is already in use."


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


def _field_name(loc) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts) or "body"


# Client-facing wording per field and rule; anything unlisted keeps pydantic's message.
FIELD_MESSAGES = {
    "name": {"required": "Name is required", "too_long": "Name cannot be more than 50 characters"},
    "email": {"*": "Please include a valid email"},
    "password": {"required": "Password is required", "too_short": "Password must be at least 6 characters"},
    "currentPassword": {"required": "Current password is required"},
    "newPassword": {"*": "New password must be at least 6 characters"},
    "title": {"required": "Task title is required", "too_long": "Title cannot exceed 100 characters"},
    "description": {"too_long": "Description cannot exceed 500 characters"},
    "status": {"choice": "Invalid task status"},
    "dueDate": {"*": "Invalid due date format"},
    "settings.notificationEmail": {"choice": "Invalid notification email preference"},
    "settings.theme": {"choice": "Invalid theme preference"},
    "settings.defaultTaskStatus": {"choice": "Invalid default task status"},
}


def _rule(err: dict) -> str:
    kind = err.get("type", "")
    if kind == "missing":
        return "required"
    if kind == "string_too_short":
        # A one-character minimum is how "must not be empty" is expressed.
        return "required" if err.get("ctx", {}).get("min_length") == 1 else "too_short"
    if kind == "string_too_long":
        return "too_long"
    if kind == "enum":
        return "choice"
    return "invalid"


def _message(field: str, err: dict) -> str:
    messages = FIELD_MESSAGES.get(field, {})
    message = messages.get(_rule(err)) or messages.get("*")
    if message:
        return message
    if err.get("type") == "value_error" and "error" in err.get("ctx", {}):
        return str(err["ctx"]["error"])
    return err.get("msg", "Invalid value")


def _validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    errors = []
    for err in exc.errors():
        field = _field_name(err.get("loc", ()))
        errors.append({field: _message(field, err)})
    return errors


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _validation_errors(exc)
    logger.info("Validation failed for %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Validation failed", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
