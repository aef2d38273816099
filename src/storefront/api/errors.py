"""Translate domain errors into HTTP responses.

Every error body carries a ``message`` the client can show as-is; validation
errors also carry the per-field ``errors`` mapping.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.shared.errors import AuthenticationError, ConflictError, ForbiddenError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _first_message(messages, default):
    if isinstance(messages, str):
        return messages
    if isinstance(messages, dict):
        for field, errors in messages.items():
            errors = errors if isinstance(errors, list | tuple) else [errors]
            if not errors:
                continue
            text = str(errors[0])
            # Protean's field errors read "is required"; name the field
            if field and not field.startswith("_") and text.startswith("is "):
                return f"{field} {text}"
            return text
    if isinstance(messages, list | tuple) and messages:
        return str(messages[0])
    return default


def _request_errors(exc: RequestValidationError) -> dict:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.setdefault(".".join(location) or "body", []).append(error.get("msg", "Invalid value"))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        messages = getattr(exc, "messages", None)
        return JSONResponse(
            status_code=400,
            content={
                "message": _first_message(messages, "Invalid request"),
                "errors": messages if isinstance(messages, dict) else {},
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = _request_errors(exc)
        return JSONResponse(
            status_code=400,
            content={"message": _first_message(errors, "Invalid request body"), "errors": errors},
        )

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return JSONResponse(
            status_code=401,
            content={"message": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden_error(request: Request, exc: ForbiddenError):
        return JSONResponse(status_code=403, content={"message": exc.message})

    @app.exception_handler(ObjectNotFoundError)
    async def handle_not_found_error(request: Request, exc: ObjectNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"message": _first_message(getattr(exc, "messages", None), "Not found")},
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict_error(request: Request, exc: ConflictError):
        return JSONResponse(status_code=409, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error", method=request.method, path=request.url.path)
        return JSONResponse(status_code=500, content={"message": "Server error"})
