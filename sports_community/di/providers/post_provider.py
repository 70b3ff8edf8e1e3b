from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.post import (
    ListPostsUseCase,
    GetPostUseCase,
    CreatePostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all post-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all post use cases.
        Read and write use cases also get the user repository so owners
        can be resolved onto the returned posts.
        """
        for use_case_class in (
            ListPostsUseCase,
            GetPostUseCase,
            CreatePostUseCase,
            UpdatePostUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    post_repository=container.get(PostRepository),
                    user_repository=container.get(UserRepository),
                )
            )
        
        container.register_factory(
            DeletePostUseCase,
            lambda: DeletePostUseCase(
                post_repository=container.get(PostRepository),
            )
        )
