from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from miraveja_registrar.domain.enums import (
    AnnotationKind,
    DiagnosticCode,
    DiagnosticSeverity,
    Lifetime,
    RegistrationMode,
)


class TypeRef(BaseModel):
    """Value object identifying a type by its module and qualified name.

    Attributes:
        module: Dotted name of the module that defines the type.
        qualname: Qualified name of the type within its module.
    """

    model_config = ConfigDict(frozen=True)

    module: str = Field(..., description="Module that defines the type.")
    qualname: str = Field(..., description="Qualified name of the type inside its module.")

    @classmethod
    def from_type(cls, value: Type) -> "TypeRef":
        """Build a reference from a live class."""
        return cls(module=value.__module__, qualname=value.__qualname__)

    @property
    def name(self) -> str:
        """Last segment of the qualified name."""
        return self.qualname.rsplit(".", 1)[-1]

    @property
    def head(self) -> str:
        """First segment of the qualified name, the name bound in the module namespace."""
        return self.qualname.split(".", 1)[0]

    @property
    def full_name(self) -> str:
        return f"{self.module}.{self.qualname}"

    def __str__(self) -> str:
        return self.full_name


class RawAnnotation(BaseModel):
    """A registration annotation as supplied by the host, before normalization.

    Attributes:
        kind: Annotation kind tag.
        positional: Positional field values, laid out per kind.
        named: Named field values; these override positional ones.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: str = Field(..., description="Annotation kind tag.")
    positional: Tuple[Any, ...] = Field(default=(), description="Positional field values.")
    named: Dict[str, Any] = Field(default_factory=dict, description="Named field values.")


class DeclaredType(BaseModel):
    """A type supplied by the host together with its contracts and annotations.

    Attributes:
        type_ref: Identity of the declared type.
        interfaces: Implemented contract types, in declaration order.
        annotations: Raw registration annotations attached to the type.
    """

    model_config = ConfigDict(frozen=True)

    type_ref: TypeRef = Field(..., description="Identity of the declared type.")
    interfaces: List[TypeRef] = Field(default_factory=list, description="Implemented contracts in declared order.")
    annotations: List[RawAnnotation] = Field(default_factory=list, description="Attached raw annotations.")

    @property
    def name(self) -> str:
        return self.type_ref.full_name


class CanonicalAnnotation(BaseModel):
    """Normalized registration intent.

    Attributes:
        kind: The annotation kind the intent was read from.
        lifetime: Lifetime of the produced bindings.
        mode: Strategy for choosing the service types.
        manual_interfaces: Explicit service types for MANUAL mode.
        build_variant: Optional label restricting the bindings to a build variant.
    """

    model_config = ConfigDict(frozen=True)

    kind: AnnotationKind
    lifetime: Lifetime = Lifetime.TRANSIENT
    mode: RegistrationMode = RegistrationMode.AUTO
    manual_interfaces: List[TypeRef] = Field(default_factory=list)
    build_variant: Optional[str] = None


class PendingRegistration(BaseModel):
    """One resolved binding awaiting emission.

    Attributes:
        group_name: Full name of the owning declared type; only used for grouping output.
        build_variant: Optional build variant label.
        service_type: The type the binding is registered under.
        implementation_type: The declared type providing the service.
        lifetime: Lifetime of the binding.
    """

    model_config = ConfigDict(frozen=True)

    group_name: str
    build_variant: Optional[str] = None
    service_type: TypeRef
    implementation_type: TypeRef
    lifetime: Lifetime


class RegistrationBlock(BaseModel):
    """Registrations of one group sharing a build variant label, with rendered statements."""

    model_config = ConfigDict(frozen=True)

    build_variant: Optional[str] = None
    registrations: List[PendingRegistration] = Field(default_factory=list)
    statements: List[str] = Field(default_factory=list)


class RegistrationGroup(BaseModel):
    """Registrations owned by one declared type; the untagged block always comes first."""

    model_config = ConfigDict(frozen=True)

    name: str
    blocks: List[RegistrationBlock] = Field(default_factory=list)


class OutputDocument(BaseModel):
    """The generated registration module.

    Attributes:
        namespace: Package the registrations were generated for.
        modules: Imported modules, deduplicated and sorted.
        import_lines: Rendered import statements, in output order.
        groups: Grouped registrations, in output order.
        text: Full generated source text.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str
    modules: List[str] = Field(default_factory=list)
    import_lines: List[str] = Field(default_factory=list)
    groups: List[RegistrationGroup] = Field(default_factory=list)
    text: str

    @property
    def registration_count(self) -> int:
        return sum(len(block.registrations) for group in self.groups for block in group.blocks)


class DiagnosticEvent(BaseModel):
    """A diagnostic reported to the host during a generation pass."""

    model_config = ConfigDict(frozen=True)

    code: DiagnosticCode
    severity: DiagnosticSeverity
    message: str
    declared_type: Optional[str] = None
    annotation_kind: Optional[str] = None


class GenerationResult(BaseModel):
    """Outcome of one generation pass.

    Attributes:
        document: The generated document, or None when nothing was produced.
        registrations: Every registration accumulated during the pass, in order.
        diagnostics: Diagnostic events reported during the pass, in order.
    """

    model_config = ConfigDict(frozen=True)

    document: Optional[OutputDocument] = None
    registrations: List[PendingRegistration] = Field(default_factory=list)
    diagnostics: List[DiagnosticEvent] = Field(default_factory=list)

    @property
    def has_output(self) -> bool:
        return self.document is not None

    @property
    def is_fatal(self) -> bool:
        return any(event.severity == DiagnosticSeverity.FATAL for event in self.diagnostics)

    def codes(self) -> List[DiagnosticCode]:
        """Diagnostic codes in the order they were reported."""
        return [event.code for event in self.diagnostics]
