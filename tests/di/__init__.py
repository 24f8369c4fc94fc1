"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .container import build_app_container, build_test_container

__all__ = [
    "MockPersistenceProvider",
    "build_app_container",
    "build_test_container",
]
