"""Error Handlers: global exception handlers for the user-registry API.

Invariants:
    - InvalidArgumentError -> 400, plain-text body = error message
    - Schema validator failures in the body or query parameter errors -> 400, plain-text messages
    - Undecodable body (including wrongly typed fields) or uncoercible path parameter -> 500 "Something went wrong"
    - Exception (catch-all) -> 500 "Something went wrong", never leaks internal details

Design Decisions:
    - Three-layer handler: domain (UserRegistryError), validation (Pydantic), catch-all (Exception)
    - Query parse failures are 400 rather than 500
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from user_registry.core.errors import UserRegistryError

logger = logging.getLogger(__name__)

GENERIC_ERROR_BODY = "Something went wrong"

# Raised by schema field validators; every other body error is a decode failure
_CONSTRAINT_ERROR_TYPE = "value_error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register user-registry domain error handler."""

    @app.exception_handler(UserRegistryError)
    async def domain_error_handler(request: Request, exc: UserRegistryError):
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
        )
        body = exc.message if exc.http_status < 500 else GENERIC_ERROR_BODY
        return PlainTextResponse(body, status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        errors = exc.errors()
        if is_decode_failure(errors):
            logger.error(
                f"Undecodable request on {request.url.path}: {errors}",
                extra={"path": request.url.path, "status_code": 500},
            )
            return PlainTextResponse(
                GENERIC_ERROR_BODY,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        logger.warning(
            f"Validation error on {request.url.path}: {errors}",
            extra={"path": request.url.path, "status_code": 400},
        )
        return PlainTextResponse(
            format_validation_errors(errors),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "status_code": 500},
        )
        return PlainTextResponse(
            GENERIC_ERROR_BODY,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def is_decode_failure(errors) -> bool:
    """True when the body could not be decoded or a path parameter could not be coerced.

    Malformed JSON, a non-object body and fields of the wrong type or format
    all count; only errors raised by the schema validators do not.
    """
    for e in errors:
        loc = tuple(e.get("loc", ()))
        if not loc:
            continue
        if loc[0] == "path":
            return True
        if loc[0] == "body" and e["type"] != _CONSTRAINT_ERROR_TYPE:
            return True
    return False


def format_validation_errors(errors) -> str:
    """Join validation errors into one plain-text message.

    Custom validator messages ("Email is required") are surfaced as-is;
    built-in pydantic errors are prefixed with the offending field.
    """
    messages = []
    for e in errors:
        ctx_error = (e.get("ctx") or {}).get("error")
        if e["type"] == "value_error" and ctx_error is not None:
            messages.append(str(ctx_error))
        else:
            field = str(e["loc"][-1]) if e.get("loc") else "request"
            messages.append(f"{field}: {e['msg']}")
    return "; ".join(messages)
