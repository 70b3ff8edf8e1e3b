# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

# Local application imports
from ..application.dto.post_dto import PostCreateRequest, PostUpdateRequest
from ..application.use_cases.post.create_post import CreatePostUseCase
from ..application.use_cases.post.get_post import GetPostUseCase
from ..application.use_cases.post.update_post import UpdatePostUseCase
from ..application.use_cases.post.delete_post import DeletePostUseCase
from ..application.use_cases.user.list_users import ListUsersUseCase
from ..di.container import get_container
from ..domain.exceptions import FieldValidationError, PersistenceError, RecordNotFoundError
from ..presentation.fragments import render_error, render_validation_errors
from ..presentation.pages import render_post_edit_form
from .dependencies import build_request, read_payload

logger = logging.getLogger(__name__)


router = APIRouter(tags=["posts"])


def _redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.post("")
async def create_post(request: Request) -> Response:
    """
    Create a post from a form or JSON body
    
    On validation failure every failing field is listed (400).
    """
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)
    
    try:
        payload = await read_payload(request)
        await create_post_use_case.execute(build_request(PostCreateRequest, payload))
    except FieldValidationError as exception:
        logger.warning(f"Post creation rejected: {exception.errors}")
        return HTMLResponse(render_validation_errors(exception.errors), status_code=status.HTTP_400_BAD_REQUEST)
    except PersistenceError as exception:
        logger.error(f"Post creation failed: {exception.message}", exc_info=True)
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _redirect_home()


@router.get("/{post_id}/edit", response_class=HTMLResponse)
async def edit_post_form(post_id: str) -> HTMLResponse:
    """Edit form with the post's values and a selector of all users"""
    container = get_container()
    post = await container.get(GetPostUseCase).execute(post_id)
    if post is None:
        return HTMLResponse(render_error(f"Post {post_id} not found"), status_code=status.HTTP_404_NOT_FOUND)
    
    users = await container.get(ListUsersUseCase).execute()
    return HTMLResponse(render_post_edit_form(post, users))


@router.patch("/{post_id}")
async def update_post(post_id: str, request: Request) -> Response:
    """Partially update a post; only submitted fields change"""
    container = get_container()
    update_post_use_case = container.get(UpdatePostUseCase)
    
    try:
        payload = await read_payload(request)
        await update_post_use_case.execute(post_id, build_request(PostUpdateRequest, payload))
    except RecordNotFoundError as exception:
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_404_NOT_FOUND)
    except FieldValidationError as exception:
        logger.warning(f"Post {post_id} update rejected: {exception.errors}")
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_400_BAD_REQUEST)
    except PersistenceError as exception:
        logger.error(f"Post {post_id} update failed: {exception.message}", exc_info=True)
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _redirect_home()


@router.delete("/{post_id}")
async def delete_post(post_id: str) -> Response:
    """Delete a post"""
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)
    
    try:
        await delete_post_use_case.execute(post_id)
    except PersistenceError as exception:
        logger.error(f"Post {post_id} delete failed: {exception.message}", exc_info=True)
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _redirect_home()
