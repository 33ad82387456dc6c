from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from blog_service.application.blogging.services.post_service import PostService
from blog_service.infrastructure.blogging.repositories import AuthorRepository, PostRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    author_repository = providers.Factory(AuthorRepository, db=db)
    post_repository = providers.Factory(PostRepository, db=db)

    # Blogging module, application services
    post_service = providers.Factory(
        PostService,
        author_lookup=author_repository,
        post_repository=post_repository,
    )


# Initialize container
container = Container()
