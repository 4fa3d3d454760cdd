"""
Testing utilities module.

Provides helpers for executing and asserting on generated registration modules.
"""

from .utilities import (
    Binding,
    GeneratedModuleScope,
    GeneratedSourceLoader,
    RecordingServiceCollection,
    load_generated_module,
    register_all,
)

__all__ = [
    "Binding",
    "GeneratedModuleScope",
    "GeneratedSourceLoader",
    "RecordingServiceCollection",
    "load_generated_module",
    "register_all",
]
