"""Process bootstrap for hosts embedding the comment engine."""

from typing import Optional

from dishka import AsyncContainer

from discuss.config import Settings
from discuss.util.di.container import create_container
from discuss.util.logging import setup_logging
from discuss.util.observability import configure_logfire


def bootstrap(settings: Optional[Settings] = None) -> AsyncContainer:
    """Configure logging and observability, then build the container.

    Logfire must be configured before the container instruments the
    database engine, so hosts call this once at startup instead of
    ``create_container()`` directly. Close the returned container on
    shutdown to drain pending hook events and dispose the engine.

    Args:
        settings: Settings used for logging setup (loaded from env if omitted)

    Returns:
        Production DI container
    """
    settings = settings or Settings()

    setup_logging(settings)
    configure_logfire(settings)

    return create_container()
