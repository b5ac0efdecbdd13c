# backend/agrismart/core/errors.py

"""
Domain error taxonomy.

Every error carries:
- status_code : HTTP status used when it reaches the API boundary
- public_message : safe text returned to the client as {"error": ...}
- the exception message itself : internal detail, logged only
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from agrismart.core.logger import logger


class AgriSmartError(Exception):
    status_code = 500
    public_message = "Request failed"

    def __init__(self, detail: str = "", public_message: str | None = None):
        super().__init__(detail or self.public_message)
        if public_message is not None:
            self.public_message = public_message


class ConfigurationError(AgriSmartError):
    """A required credential or setting is missing. Not retryable."""
    status_code = 500
    public_message = "Service is not configured"


class UpstreamUnavailable(AgriSmartError):
    """Network / HTTP failure talking to the weather or AI provider."""
    status_code = 502
    public_message = "Upstream service unavailable"


class MalformedResponse(AgriSmartError):
    """Provider answered, but not in the shape we expect."""
    status_code = 502
    public_message = "Upstream service unavailable"


class PersistenceError(AgriSmartError):
    """The store rejected a write; the transaction was rolled back."""
    status_code = 500
    public_message = "Failed to save data"


async def agrismart_error_handler(request: Request, exc: AgriSmartError):
    logger.error(
        f"{type(exc).__name__}: {exc}",
        extra={
            "request_id": request.scope.get("request_id"),
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.status_code,
        },
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AgriSmartError, agrismart_error_handler)
