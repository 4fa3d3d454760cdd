from abc import ABC, abstractmethod
from typing import Any, List, Sequence

from miraveja_registrar.domain.models import (
    CanonicalAnnotation,
    DeclaredType,
    DiagnosticEvent,
    OutputDocument,
    PendingRegistration,
    RawAnnotation,
)


class IServiceCollection(ABC):
    """Abstract service collection that generated registration modules bind into."""

    @abstractmethod
    def add_singleton(self, service_type: Any, implementation_type: Any) -> Any:
        """Bind a service type to an implementation shared for the container's lifetime."""

    @abstractmethod
    def add_scoped(self, service_type: Any, implementation_type: Any) -> Any:
        """Bind a service type to an implementation shared within one scope."""

    @abstractmethod
    def add_transient(self, service_type: Any, implementation_type: Any) -> Any:
        """Bind a service type to an implementation created on every request."""


class IAnnotationResolver(ABC):
    """Abstract interface for normalizing raw registration annotations."""

    @abstractmethod
    def resolve(self, annotation: RawAnnotation) -> CanonicalAnnotation:
        """Normalize one raw annotation.

        Args:
            annotation: The raw annotation to normalize.

        Returns:
            The canonical registration intent.

        Raises:
            ConfigurationError: If the annotation kind is not recognized.
        """


class IRegistrationPlanner(ABC):
    """Abstract interface for turning registration intent into bindings."""

    @abstractmethod
    def plan(self, declared_type: DeclaredType, annotation: CanonicalAnnotation) -> List[PendingRegistration]:
        """Produce the ordered bindings for one annotation on one declared type.

        Args:
            declared_type: The annotated type with its implemented contracts.
            annotation: The canonical annotation to plan.
        """


class ISourceEmitter(ABC):
    """Abstract interface for rendering registrations as source text."""

    @abstractmethod
    def emit(self, registrations: Sequence[PendingRegistration]) -> OutputDocument:
        """Render every registration of a pass into one output document.

        Args:
            registrations: All registrations of the pass, in accumulation order.
        """


class IDiagnosticSink(ABC):
    """Abstract receiver of diagnostic events."""

    @abstractmethod
    def report(self, event: DiagnosticEvent) -> None:
        """Record one diagnostic event."""

    @abstractmethod
    def events(self) -> List[DiagnosticEvent]:
        """Return every event reported so far, in order."""
