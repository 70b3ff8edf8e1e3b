"""
HTTP layer for the Sports Community app.

Exposes the HTML listing and form routes, the read-only JSON API under
/api, and the method-override middleware the HTML forms rely on.
"""
from .pages_controller import router as pages_router
from .users_controller import router as users_router
from .posts_controller import router as posts_router
from .users_api_controller import router as users_api_router
from .posts_api_controller import router as posts_api_router


__all__ = ["pages_router", "users_router", "posts_router", "users_api_router", "posts_api_router"]
