"""
Application layer - Use cases and orchestration.

This layer resolves annotations, plans registrations and renders them.
It depends only on the Domain layer.
"""

from .annotation_resolver import AnnotationResolver
from .diagnostics import DiagnosticCollector
from .generator import RegistrationGenerator
from .registration_planner import RegistrationPlanner
from .source_emitter import DEFAULT_COLLECTION_TYPE, DEFAULT_CONTAINER_MODULE, SourceEmitter

__all__ = [
    "AnnotationResolver",
    "DiagnosticCollector",
    "RegistrationGenerator",
    "RegistrationPlanner",
    "SourceEmitter",
    "DEFAULT_COLLECTION_TYPE",
    "DEFAULT_CONTAINER_MODULE",
]
