"""
HTML error fragments returned in place of a redirect when a form submission
fails. Each fragment links back to the listing page.
"""
# Standard library imports
from html import escape
from typing import Iterable


def render_error(message: str) -> str:
    """Single-line error with a back link"""
    return f'<p>Error: {escape(message)}</p><a href="/">Back</a>'


def render_validation_errors(errors: Iterable[str]) -> str:
    """Aggregated list of every failing field"""
    items = "".join(f"<li>{escape(error)}</li>" for error in errors)
    return (
        "<div>"
        "<h1>Validation Error</h1>"
        f"<ul>{items}</ul>"
        '<a href="/">Go Back</a>'
        "</div>"
    )
