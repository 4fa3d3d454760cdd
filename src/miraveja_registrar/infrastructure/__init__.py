"""
Infrastructure layer - Host integration.

This layer contains the registration decorators, package discovery, settings,
the command line interface and testing helpers.
It depends on both Application and Domain layers.
"""

from . import discovery, testing
from .decorators import get_annotations, injectable, scoped_service, singleton_service, transient_service

__all__ = [
    "discovery",
    "testing",
    "get_annotations",
    "injectable",
    "scoped_service",
    "singleton_service",
    "transient_service",
]
