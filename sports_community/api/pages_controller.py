# External package imports
from fastapi import APIRouter
from fastapi.responses import HTMLResponse

# Local application imports
from ..application.use_cases.user.list_users import ListUsersUseCase
from ..application.use_cases.post.list_posts import ListPostsUseCase
from ..di.container import get_container
from ..presentation.pages import render_index


router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """
    Listing page with create forms, every user and every post
    
    Data is fetched fresh on every request.
    """
    container = get_container()
    users = await container.get(ListUsersUseCase).execute()
    posts = await container.get(ListPostsUseCase).execute()
    
    return HTMLResponse(render_index(users, posts))
