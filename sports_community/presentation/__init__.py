"""Server-rendered HTML for the listing page, edit forms and error fragments."""

from .pages import (
    render_index,
    render_user_edit_form,
    render_post_edit_form,
)
from .fragments import (
    render_error,
    render_validation_errors,
)

__all__ = [
    "render_index",
    "render_user_edit_form",
    "render_post_edit_form",
    "render_error",
    "render_validation_errors",
]
