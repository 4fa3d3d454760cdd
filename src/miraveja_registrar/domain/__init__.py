"""
Domain layer - Core registration models and rules.

This layer contains the value objects, enums and contracts used to describe
registration intent. It has no dependencies on other layers.
"""

from .enums import AnnotationKind, DiagnosticCode, DiagnosticSeverity, Lifetime, RegistrationMode
from .exceptions import ConfigurationError, DiscoveryError, RegistrarException
from .interfaces import (
    IAnnotationResolver,
    IDiagnosticSink,
    IRegistrationPlanner,
    IServiceCollection,
    ISourceEmitter,
)
from .models import (
    CanonicalAnnotation,
    DeclaredType,
    DiagnosticEvent,
    GenerationResult,
    OutputDocument,
    PendingRegistration,
    RawAnnotation,
    RegistrationBlock,
    RegistrationGroup,
    TypeRef,
)
from .registry import AnnotationKindRegistry

__all__ = [
    # Enums
    "AnnotationKind",
    "DiagnosticCode",
    "DiagnosticSeverity",
    "Lifetime",
    "RegistrationMode",
    # Exceptions
    "RegistrarException",
    "ConfigurationError",
    "DiscoveryError",
    # Interfaces
    "IAnnotationResolver",
    "IDiagnosticSink",
    "IRegistrationPlanner",
    "IServiceCollection",
    "ISourceEmitter",
    # Models
    "TypeRef",
    "RawAnnotation",
    "DeclaredType",
    "CanonicalAnnotation",
    "PendingRegistration",
    "RegistrationBlock",
    "RegistrationGroup",
    "OutputDocument",
    "DiagnosticEvent",
    "GenerationResult",
    # Registry
    "AnnotationKindRegistry",
]
