"""Integration between body_validator and FastAPI.

This module bridges the gap between:
- Validators (is_valid / get_messages over untyped data)
- FastAPI request handling (dependencies, HTTP errors, JSON responses)
"""

import json
import logging
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from body_validator.config import ValidationConfig
from body_validator.exceptions import InvalidBodyError
from body_validator.messages import double_quote
from body_validator.services import validate
from body_validator.types import UNDEFINED, Validator

logger = logging.getLogger(__name__)


class ValidationErrorResponse(BaseModel):
    """Body of a response rejecting a request."""

    valid: bool = False
    messages: list[str]


# =============================================================================
# Responses
# =============================================================================


def create_error_response(messages: list[str], status_code: int = 422) -> JSONResponse:
    """Create an error response listing every validation message."""
    return JSONResponse(
        status_code=status_code,
        content=ValidationErrorResponse(messages=messages).model_dump(),
    )


def register_exception_handler(app: FastAPI, config: ValidationConfig | None = None) -> None:
    """Answer InvalidBodyError raised in handlers with an error response.

    Lets handlers call ``assert_valid`` directly instead of declaring a
    ``validated_body`` dependency.
    """
    settings = config or ValidationConfig.from_env()

    async def handle_invalid_body(request: Request, exc: InvalidBodyError) -> JSONResponse:
        if settings.log_rejections:
            logger.info(
                "Rejected %s %s: %d message(s)",
                request.method,
                request.url.path,
                len(exc.messages),
            )
        return create_error_response(exc.messages, settings.status_code)

    app.add_exception_handler(InvalidBodyError, handle_invalid_body)


# =============================================================================
# Dependencies
# =============================================================================


def validated_body(
    validator: Validator,
    *,
    name: str | None = None,
    config: ValidationConfig | None = None,
) -> Callable[[Request], Awaitable[Any]]:
    """Create a FastAPI dependency that validates the JSON request body.

    Example:
        create_user = v.object({"name": v.string, "age": v.integer})

        @app.post("/users")
        async def create(body: dict = Depends(validated_body(create_user))):
            ...

    Args:
        validator: Schema the body must satisfy
        name: Root name in messages; defaults to ``config.root_name``
        config: Settings; read from the environment when omitted

    Returns:
        A dependency returning the parsed body unchanged. An empty body is
        validated, and returned, as UNDEFINED.
    """
    settings = config or ValidationConfig.from_env()
    label = name or settings.root_name

    def reject(request: Request, messages: list[str]) -> HTTPException:
        if settings.log_rejections:
            logger.info(
                "Rejected %s %s: %s",
                request.method,
                request.url.path,
                "; ".join(messages),
            )
        return HTTPException(
            status_code=settings.status_code,
            detail=ValidationErrorResponse(messages=messages).model_dump(),
        )

    async def dependency(request: Request) -> Any:
        raw = await request.body()
        if not raw.strip():
            body: Any = UNDEFINED
        else:
            try:
                body = json.loads(raw)
            except (ValueError, RecursionError):
                raise reject(request, [f"{double_quote(label)} is not valid JSON"]) from None

        result = validate(validator, body, label)
        if not result.valid:
            raise reject(request, result.messages)
        return body

    return dependency
