"""
miraveja-registrar: Decorator driven service registration generator.

Public API exports for the miraveja-registrar package.
"""

# Application exports
from miraveja_registrar.application import RegistrationGenerator

# Domain exports
from miraveja_registrar.domain import (
    AnnotationKind,
    AnnotationKindRegistry,
    ConfigurationError,
    DiscoveryError,
    GenerationResult,
    IServiceCollection,
    Lifetime,
    OutputDocument,
    RegistrarException,
    RegistrationMode,
)

# Infrastructure exports
from miraveja_registrar.infrastructure import (
    injectable,
    scoped_service,
    singleton_service,
    transient_service,
)
from miraveja_registrar.infrastructure.discovery import TypeScanner

__version__ = "0.1.0"

__all__ = [
    # Generation
    "RegistrationGenerator",
    "TypeScanner",
    "GenerationResult",
    "OutputDocument",
    # Decorators
    "injectable",
    "transient_service",
    "scoped_service",
    "singleton_service",
    # Enums
    "AnnotationKind",
    "Lifetime",
    "RegistrationMode",
    # Registry
    "AnnotationKindRegistry",
    # Service collection contract
    "IServiceCollection",
    # Exceptions
    "RegistrarException",
    "ConfigurationError",
    "DiscoveryError",
]
