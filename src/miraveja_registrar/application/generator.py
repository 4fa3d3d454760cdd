"""Application layer - Orchestration of one registration generation pass."""

import logging
from typing import Iterable, List, Optional

from miraveja_registrar.application.annotation_resolver import AnnotationResolver
from miraveja_registrar.application.diagnostics import DiagnosticCollector
from miraveja_registrar.application.registration_planner import RegistrationPlanner
from miraveja_registrar.application.source_emitter import (
    DEFAULT_COLLECTION_TYPE,
    DEFAULT_CONTAINER_MODULE,
    SourceEmitter,
)
from miraveja_registrar.domain import (
    AnnotationKindRegistry,
    ConfigurationError,
    DeclaredType,
    DiagnosticCode,
    DiagnosticSeverity,
    GenerationResult,
    IDiagnosticSink,
    PendingRegistration,
)

logger = logging.getLogger(__name__)


class RegistrationGenerator:
    """Runs a generation pass: resolve, plan and emit registrations for declared types.

    Each pass is self-contained; the generator keeps no state between passes.

    Attributes:
        _registry: Default recognized annotation kinds.
        _planner: Component dispatching registration modes.
        _namespace: Package name written into the generated module, if fixed.
        _container_module: Module exporting the service collection type.
        _collection_type: Name of the service collection type.
        _fail_on_configuration_error: Abort the pass on unrecognized annotation kinds.
    """

    def __init__(
        self,
        registry: Optional[AnnotationKindRegistry] = None,
        namespace: Optional[str] = None,
        container_module: str = DEFAULT_CONTAINER_MODULE,
        collection_type: str = DEFAULT_COLLECTION_TYPE,
        strict_manual_interfaces: bool = False,
        fail_on_configuration_error: bool = True,
    ) -> None:
        """Initialize the generator.

        Args:
            registry: Recognized annotation kinds; defaults to every built-in kind.
            namespace: Package name for the generated module; derived from the
                first registration when omitted.
            container_module: Module exporting the service collection type.
            collection_type: Name of the service collection type.
            strict_manual_interfaces: Drop MANUAL entries the type does not implement.
            fail_on_configuration_error: Raise on unrecognized annotation kinds
                instead of skipping the annotation.
        """
        self._registry = registry if registry is not None else AnnotationKindRegistry.default()
        self._planner = RegistrationPlanner(strict_manual_interfaces=strict_manual_interfaces)
        self._strict_manual_interfaces = strict_manual_interfaces
        self._namespace = namespace
        self._container_module = container_module
        self._collection_type = collection_type
        self._fail_on_configuration_error = fail_on_configuration_error

    def generate(
        self,
        declared_types: Iterable[DeclaredType],
        registry: Optional[AnnotationKindRegistry] = None,
        sink: Optional[IDiagnosticSink] = None,
    ) -> GenerationResult:
        """Run one pass over the declared types, in the order supplied.

        Args:
            declared_types: Types enumerated by the host.
            registry: Recognized kinds for this pass; defaults to the generator's.
            sink: Optional receiver that is sent every diagnostic as it is reported.

        Returns:
            The result holding the document (or None), registrations and diagnostics.

        Raises:
            ConfigurationError: If an annotation kind is not recognized and the
                generator is configured to fail on configuration errors.

        Example:
            >>> result = RegistrationGenerator(namespace="app").generate(TypeScanner().scan_packages(["app"]))
            >>> print(result.document.text)
        """
        registry = registry if registry is not None else self._registry
        collector = DiagnosticCollector()

        def report(code: DiagnosticCode, message: str, **details) -> None:
            event = collector.emit(code, message, **details)
            if sink is not None:
                sink.report(event)

        report(DiagnosticCode.START, "Starting registration generation")

        if not registry:
            report(DiagnosticCode.MISSING_BASE_KIND, "No recognized registration annotation kinds are available")
            return GenerationResult(diagnostics=collector.events())

        resolver = AnnotationResolver(registry)
        registrations: List[PendingRegistration] = []

        for declared_type in declared_types:
            recognized = [str(a.kind) for a in declared_type.annotations if registry.recognizes(a.kind)]
            if recognized:
                report(
                    DiagnosticCode.FOUND,
                    f"Found {', '.join(recognized)} on {declared_type.name}",
                    declared_type=declared_type.name,
                )

            for annotation in declared_type.annotations:
                try:
                    canonical = resolver.resolve(annotation)
                except ConfigurationError as e:
                    error = e.for_declared_type(declared_type.name)
                    report(
                        DiagnosticCode.CONFIGURATION_ERROR,
                        str(error),
                        severity=(
                            DiagnosticSeverity.ERROR if self._fail_on_configuration_error else DiagnosticSeverity.WARNING
                        ),
                        declared_type=declared_type.name,
                        annotation_kind=str(annotation.kind),
                    )
                    if self._fail_on_configuration_error:
                        raise error from e
                    continue

                if self._strict_manual_interfaces:
                    for iface in self._planner.unimplemented_interfaces(declared_type, canonical):
                        report(
                            DiagnosticCode.MANUAL_INTERFACE_SKIPPED,
                            f"{declared_type.name} does not implement {iface}; binding skipped",
                            declared_type=declared_type.name,
                            annotation_kind=str(canonical.kind),
                        )

                registrations.extend(self._planner.plan(declared_type, canonical))

        if not registrations:
            report(DiagnosticCode.EMPTY_RESULT, "No service registrations were produced")
            return GenerationResult(diagnostics=collector.events())

        emitter = SourceEmitter(
            namespace=self._namespace or _derive_namespace(registrations),
            container_module=self._container_module,
            collection_type=self._collection_type,
        )
        document = emitter.emit(registrations)
        report(
            DiagnosticCode.COMPLETE,
            f"Generated {document.registration_count} registrations for {len(document.groups)} types",
        )
        return GenerationResult(
            document=document,
            registrations=registrations,
            diagnostics=collector.events(),
        )


def _derive_namespace(registrations: List[PendingRegistration]) -> str:
    return registrations[0].implementation_type.module.split(".", 1)[0]
