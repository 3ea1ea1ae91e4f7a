"""API router factory functions."""
from .crawls import create_crawls_router
from .link_checks import create_link_checks_router
from .systems import create_systems_router

__all__ = [
    "create_crawls_router",
    "create_link_checks_router",
    "create_systems_router",
]
