# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

# Local application imports
from ..application.dto.user_dto import UserCreateRequest, UserUpdateRequest
from ..application.use_cases.user.create_user import CreateUserUseCase
from ..application.use_cases.user.get_user import GetUserUseCase
from ..application.use_cases.user.update_user import UpdateUserUseCase
from ..application.use_cases.user.delete_user import DeleteUserUseCase
from ..di.container import get_container
from ..domain.exceptions import FieldValidationError, PersistenceError, RecordNotFoundError
from ..presentation.fragments import render_error
from ..presentation.pages import render_user_edit_form
from .dependencies import build_request, read_payload

logger = logging.getLogger(__name__)


router = APIRouter(tags=["users"])


def _redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.post("")
async def create_user(request: Request) -> Response:
    """
    Create a user from a form or JSON body
    
    Redirects to the listing on success; renders the validation error
    with a back link (400) otherwise.
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    try:
        payload = await read_payload(request)
        await create_user_use_case.execute(build_request(UserCreateRequest, payload))
    except FieldValidationError as exception:
        logger.warning(f"User creation rejected: {exception.errors}")
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_400_BAD_REQUEST)
    except PersistenceError as exception:
        logger.error(f"User creation failed: {exception.message}", exc_info=True)
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _redirect_home()


@router.get("/{user_id}/edit", response_class=HTMLResponse)
async def edit_user_form(user_id: str) -> HTMLResponse:
    """Edit form pre-filled with the user's current values"""
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    user = await get_user_use_case.execute(user_id)
    if user is None:
        return HTMLResponse(render_error(f"User {user_id} not found"), status_code=status.HTTP_404_NOT_FOUND)
    
    return HTMLResponse(render_user_edit_form(user))


@router.patch("/{user_id}")
async def update_user(user_id: str, request: Request) -> Response:
    """
    Partially update a user; only submitted fields change
    
    Reached from the edit form through ``?_method=PATCH``.
    """
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)
    
    try:
        payload = await read_payload(request)
        await update_user_use_case.execute(user_id, build_request(UserUpdateRequest, payload))
    except RecordNotFoundError as exception:
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_404_NOT_FOUND)
    except FieldValidationError as exception:
        logger.warning(f"User {user_id} update rejected: {exception.errors}")
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_400_BAD_REQUEST)
    except PersistenceError as exception:
        logger.error(f"User {user_id} update failed: {exception.message}", exc_info=True)
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _redirect_home()


@router.delete("/{user_id}")
async def delete_user(user_id: str) -> Response:
    """Delete a user; their posts stay and show "Unknown" as owner"""
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    try:
        await delete_user_use_case.execute(user_id)
    except PersistenceError as exception:
        logger.error(f"User {user_id} delete failed: {exception.message}", exc_info=True)
        return HTMLResponse(render_error(exception.message), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return _redirect_home()
