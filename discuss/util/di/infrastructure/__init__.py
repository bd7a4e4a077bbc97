"""Infrastructure providers."""

# Import bases
from .clock import ClockProvider
from .hooks import HooksProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .clock import ProdClockProvider  # noqa: F401
from .hooks import ProdHooksProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ClockProvider",
    "HooksProvider",
    "PersistenceProvider",
    "ProdClockProvider",
    "ProdHooksProvider",
    "ProdPersistenceProvider",
]
