"""Error propagation pipeline.

Route handlers never recover from failures locally. An async handler wrapped
with ``wrap_async`` forwards whatever it raises into the application's
``ErrorPipeline``, an ordered chain of stages modelled on error middleware:

    handler --(raise)--> wrap_async --> classify_validation_error
                                    --> respond_with_error --> response

Each stage is called as ``stage(error, request, call_next)``. A stage either
hands a (possibly replaced) error to ``call_next`` or, if it is terminal,
returns the response itself.
"""

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence

import pydantic
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException

from farmstand.core.errors import AppError, ValidationError, describe_validation_errors

logger = logging.getLogger(__name__)

DEFAULT_STATUS = 500
DEFAULT_MESSAGE = "Something went wrong!"
VALIDATION_PREFIX = "Validation Failed...  "

CallNext = Callable[[BaseException], Response]
Stage = Callable[[BaseException, Request, CallNext], Response]


def error_kind(error: BaseException) -> str:
    """Return the discriminant used to classify an error."""
    return type(error).__name__


def handle_validation_error(error: BaseException) -> AppError:
    """Turn a data store validation failure into a 400 AppError."""
    logger.warning(f"Validation failure: {error!r}")
    message = getattr(error, "message", None)
    if message is None and isinstance(error, pydantic.ValidationError):
        message = describe_validation_errors(error)
    return AppError(f"{VALIDATION_PREFIX}{message or ''}", 400)


def classify_validation_error(
    error: BaseException, request: Request, call_next: CallNext
) -> Response:
    """Normalize validation failures, pass everything else through as is."""
    kind = error_kind(error)
    logger.info(f"{request.method} {request.url.path} failed with {kind}")
    if kind == "ValidationError":
        error = handle_validation_error(error)
    return call_next(error)


def respond_with_error(
    error: BaseException, request: Request, call_next: CallNext
) -> Response:
    """Write the final plain-text response. Terminal stage.

    Framework ``HTTPException``s carry ``status_code`` and ``detail`` instead of
    ``status`` and ``message``; both spellings are honored.
    """
    status = getattr(error, "status", None) or DEFAULT_STATUS
    message = getattr(error, "message", None) or DEFAULT_MESSAGE
    headers = None
    if isinstance(error, HTTPException):
        status = error.status_code
        if isinstance(error.detail, str) and error.detail:
            message = error.detail
        headers = error.headers
    if status >= 500:
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}",
            exc_info=error,
        )
    return PlainTextResponse(message, status_code=status, headers=headers)


class ErrorPipeline:
    """Ordered chain of error stages ending in one that writes a response."""

    def __init__(self, stages: Sequence[Stage] | None = None):
        if stages is None:
            stages = (classify_validation_error, respond_with_error)
        self.stages = tuple(stages)

    def dispatch(self, error: BaseException, request: Request) -> Response:
        """Run ``error`` through the stages and return the response."""

        def call_at(index: int) -> CallNext:
            def call_next(current: BaseException) -> Response:
                if index >= len(self.stages):
                    raise RuntimeError(
                        "Error pipeline ended without producing a response"
                    ) from current
                stage = self.stages[index]
                return stage(current, request, call_at(index + 1))

            return call_next

        return call_at(0)(error)


def wrap_async(
    handler: Callable[..., Awaitable[Response]],
) -> Callable[..., Awaitable[Response]]:
    """Forward failures of an async route handler into the error pipeline.

    The wrapped handler must be a coroutine function taking a ``request``
    parameter. Successful calls return the handler's own response; on failure
    the original exception is dispatched exactly once to the pipeline stored
    on ``request.app.state.error_pipeline``. That includes ``HTTPException``,
    which answers with its own status code and detail.
    """
    if not inspect.iscoroutinefunction(handler):
        raise TypeError(f"{handler.__qualname__} must be an async function")
    if "request" not in inspect.signature(handler).parameters:
        raise TypeError(f"{handler.__qualname__} must accept a 'request' parameter")

    @functools.wraps(handler)
    async def wrapper(*args, **kwargs):
        try:
            return await handler(*args, **kwargs)
        except Exception as exc:
            request = kwargs.get("request")
            if request is None:
                request = next(arg for arg in args if isinstance(arg, Request))
            return request.app.state.error_pipeline.dispatch(exc, request)

    return wrapper


def install_error_handlers(app: FastAPI, pipeline: ErrorPipeline | None = None) -> None:
    """Attach the pipeline to ``app`` for wrapped and unwrapped routes alike."""
    app.state.error_pipeline = pipeline or ErrorPipeline()

    async def _dispatch(request: Request, exc: Exception) -> Response:
        return request.app.state.error_pipeline.dispatch(exc, request)

    app.add_exception_handler(AppError, _dispatch)
    app.add_exception_handler(ValidationError, _dispatch)
    # Unknown routes, bad methods and malformed path or query parameters
    app.add_exception_handler(HTTPException, _dispatch)
    app.add_exception_handler(RequestValidationError, _dispatch)
