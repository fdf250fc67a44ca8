"""Entry point for applications embedding the comment core."""

from dishka import Container

from pagecomments.config import Settings
from pagecomments.util.di.container import create_container, load_settings
from pagecomments.util.logging import setup_logging
from pagecomments.util.observability import configure_logfire


def bootstrap(settings: Settings | None = None) -> Container:
    """Configure logging and observability, then build the DI container.

    Usage:
        container = bootstrap()
        with container() as request:
            use_case = request.get(SubmitCommentUseCase)
            response = use_case.execute(
                SubmitCommentRequest(page_id="blog/hello", form=post_data)
            )

    Args:
        settings: Application settings (loaded from the environment if omitted)

    Returns:
        Production DI container
    """
    settings = settings or load_settings()
    setup_logging(settings)
    configure_logfire(settings)
    return create_container(settings)
