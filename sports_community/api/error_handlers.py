"""
Application-level exception handlers.

Validation and not-found errors are handled inside each controller; this
catches store failures that escape a read-only route.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from ..domain.exceptions import PersistenceError
from ..presentation.fragments import render_error

logger = logging.getLogger(__name__)


async def persistence_exception_handler(request: Request, exc: PersistenceError):
    """Answer a failed store operation with a minimal 500 response"""
    logger.error(f"Persistence failure on {request.method} {request.url.path}: {exc.message}", exc_info=exc)
    
    if request.url.path.startswith("/api/"):
        return JSONResponse(status_code=500, content={"detail": exc.message})
    return HTMLResponse(render_error(exc.message), status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the exception handlers to the application"""
    app.add_exception_handler(PersistenceError, persistence_exception_handler)
