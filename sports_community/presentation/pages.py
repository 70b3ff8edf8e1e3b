"""
Full HTML pages.

Every function here is a pure function of the records passed in; the
controllers fetch fresh data on each request and nothing is cached.
"""
# Standard library imports
from html import escape
from typing import Any, List, Sequence

# Local application imports
from ..application.dto.post_dto import PostResponse
from ..application.dto.user_dto import UserResponse


API_ENDPOINTS = [
    ("/api/users", "GET /api/users", "List all users"),
    ("/api/posts", "GET /api/posts", "List all posts"),
    ("/api/users/:id", "GET /api/users/:id", "Get user details"),
    ("/api/posts/:id", "GET /api/posts/:id", "Get post details"),
]


def _e(value: Any) -> str:
    return escape(str(value), quote=True)


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _row_actions(collection: str, record_id: str) -> str:
    record_id = _e(record_id)
    return (
        f'<form method="POST" action="/{collection}/{record_id}?_method=DELETE" style="display:inline;">'
        '<button type="submit">Delete</button>'
        "</form>"
        f'<form method="GET" action="/{collection}/{record_id}/edit" style="display:inline;">'
        '<button type="submit">Edit</button>'
        "</form>"
    )


def _user_options(users: Sequence[UserResponse], selected_id: str = "") -> str:
    options: List[str] = []
    for user in users:
        selected = " selected" if user.id == selected_id else ""
        options.append(
            f'<option value="{_e(user.id)}"{selected}>{_e(user.first_name)} {_e(user.last_name)}</option>'
        )
    return "".join(options)


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        f"<head><title>{_e(title)}</title></head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n"
    )


def render_index(users: Sequence[UserResponse], posts: Sequence[PostResponse]) -> str:
    """Listing page with the API index, create forms and every user and post"""
    endpoints = "".join(
        f'<li><a href="{_e(href)}">{_e(label)}</a> - {_e(description)}</li>'
        for href, label, description in API_ENDPOINTS
    )
    
    user_items = "".join(
        "<li>"
        f"ID: {_e(user.id)} {_e(user.first_name)} {_e(user.last_name)} ({_e(user.email)})"
        f" - Age: {_e(user.age)} Admin? {_bool_text(user.is_admin)}"
        f"{_row_actions('users', user.id)}"
        "</li>"
        for user in users
    )
    
    post_items = "".join(
        "<li>"
        f"<strong>{_e(post.title)}</strong>: {_e(post.content)} by {_e(post.owner_name)}"
        f"{_row_actions('posts', post.id)}"
        "</li>"
        for post in posts
    )
    
    body = (
        "<h1>Sports Community</h1>\n"
        "<h2>API Endpoints</h2>\n"
        f"<ul>{endpoints}</ul>\n"
        "<h2>Users</h2>\n"
        '<form method="POST" action="/users">'
        '<input type="text" name="firstName" placeholder="First Name" required />'
        '<input type="text" name="lastName" placeholder="Last Name" required />'
        '<input type="number" name="age" placeholder="Age" required />'
        '<input type="email" name="email" placeholder="Email" required />'
        '<input type="checkbox" name="is_admin" /> Admin'
        '<button type="submit">Create User</button>'
        "</form>\n"
        f"<ul>{user_items}</ul>\n"
        "<h2>Posts</h2>\n"
        '<form method="POST" action="/posts">'
        '<input type="text" name="title" placeholder="Title" required />'
        '<textarea name="content" placeholder="Content" required></textarea>'
        '<select name="user" required>'
        '<option value="">Select User</option>'
        f"{_user_options(users)}"
        "</select>"
        '<button type="submit">Create Post</button>'
        "</form>\n"
        f"<ul>{post_items}</ul>"
    )
    return _page("Sports Community", body)


def render_user_edit_form(user: UserResponse) -> str:
    """Edit form pre-filled with the user's current values.

    The hidden ``is_admin`` field precedes the checkbox so an unchecked box
    still submits ``off``; a checked box overrides it.
    """
    checked = " checked" if user.is_admin else ""
    body = (
        f'<form method="POST" action="/users/{_e(user.id)}?_method=PATCH">'
        f'<input type="text" name="firstName" value="{_e(user.first_name)}" required />'
        f'<input type="text" name="lastName" value="{_e(user.last_name)}" required />'
        f'<input type="number" name="age" value="{_e(user.age)}" required />'
        f'<input type="email" name="email" value="{_e(user.email)}" required />'
        '<input type="hidden" name="is_admin" value="off" />'
        f'<input type="checkbox" name="is_admin"{checked} /> Admin'
        '<button type="submit">Update User</button>'
        "</form>"
    )
    return _page("Edit User", body)


def render_post_edit_form(post: PostResponse, users: Sequence[UserResponse]) -> str:
    """Edit form pre-filled with the post, owner pre-selected among all users"""
    owner_known = any(user.id == post.user_id for user in users)
    placeholder = "" if owner_known else '<option value="">Select User</option>'
    body = (
        f'<form method="POST" action="/posts/{_e(post.id)}?_method=PATCH">'
        f'<input type="text" name="title" value="{_e(post.title)}" required />'
        f'<textarea name="content" required>{_e(post.content)}</textarea>'
        '<select name="user" required>'
        f"{placeholder}{_user_options(users, selected_id=post.user_id)}"
        "</select>"
        '<button type="submit">Update Post</button>'
        "</form>"
    )
    return _page("Edit Post", body)
