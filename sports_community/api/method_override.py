"""
Method-override middleware.

HTML forms can only submit GET and POST. A POST carrying ``?_method=PATCH``
(or PUT/DELETE) is dispatched to the route for that verb instead.
"""

import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class MethodOverrideMiddleware(BaseHTTPMiddleware):
    """Rewrite the request method from a query parameter on POST requests"""
    
    OVERRIDE_PARAM = "_method"
    ALLOWED_METHODS = {"PATCH", "PUT", "DELETE"}
    
    async def dispatch(self, request: Request, call_next):
        if request.method == "POST":
            override = request.query_params.get(self.OVERRIDE_PARAM, "").upper()
            if override in self.ALLOWED_METHODS:
                logger.debug(f"Method override: POST -> {override} {request.url.path}")
                request.scope["method"] = override
        
        return await call_next(request)
