"""Application layer - Normalization of raw registration annotations."""

import logging
from typing import Any, List, Optional

from miraveja_registrar.domain import (
    AnnotationKindRegistry,
    CanonicalAnnotation,
    IAnnotationResolver,
    Lifetime,
    RawAnnotation,
    RegistrationMode,
    TypeRef,
)

logger = logging.getLogger(__name__)

LIFETIME_FIELD = "lifetime"
MODE_FIELD = "mode"
INTERFACES_FIELD = "interfaces"
BUILD_VARIANT_FIELD = "build_variant"


class AnnotationResolver(IAnnotationResolver):
    """Normalizes raw annotations into canonical registration intent.

    Positional values are read according to the kind's layout:
    INJECTABLE carries ``[lifetime, mode, interfaces, build_variant]``, the
    specialised kinds carry ``[mode, interfaces, build_variant]`` and imply
    their lifetime. Named values are applied last and override positional ones.

    Attributes:
        _registry: The recognized annotation kinds.
    """

    def __init__(self, registry: AnnotationKindRegistry) -> None:
        """Initialize the resolver with the recognized annotation kinds.

        Args:
            registry: Kinds that may be resolved.
        """
        self._registry = registry

    def resolve(self, annotation: RawAnnotation) -> CanonicalAnnotation:
        """Normalize one raw annotation.

        Args:
            annotation: The raw annotation to normalize.

        Returns:
            The canonical annotation.

        Raises:
            ConfigurationError: If the annotation kind is not recognized.

        Example:
            >>> resolver = AnnotationResolver(AnnotationKindRegistry.default())
            >>> canonical = resolver.resolve(
            ...     RawAnnotation(kind="scoped_service", positional=(RegistrationMode.INSTANCE,))
            ... )
            >>> canonical.lifetime, canonical.mode
            (<Lifetime.SCOPED: 'scoped'>, <RegistrationMode.INSTANCE: 'instance'>)
        """
        kind = self._registry.lookup(annotation.kind)
        positional = list(annotation.positional)

        if kind.implied_lifetime is None:
            lifetime = Lifetime.coerce(positional.pop(0)) if positional else Lifetime.TRANSIENT
        else:
            lifetime = kind.implied_lifetime

        mode = RegistrationMode.coerce(positional[0]) if len(positional) > 0 else RegistrationMode.AUTO
        interfaces = _coerce_interfaces(positional[1]) if len(positional) > 1 else []
        build_variant = _normalize_label(positional[2]) if len(positional) > 2 else None

        for field_name, value in annotation.named.items():
            if field_name == LIFETIME_FIELD:
                lifetime = Lifetime.coerce(value)
            elif field_name == MODE_FIELD:
                mode = RegistrationMode.coerce(value)
            elif field_name == INTERFACES_FIELD:
                interfaces = _coerce_interfaces(value)
            elif field_name == BUILD_VARIANT_FIELD:
                build_variant = _normalize_label(value)
            else:
                logger.debug("Ignoring unknown field %r on %s annotation", field_name, kind)

        return CanonicalAnnotation(
            kind=kind,
            lifetime=lifetime,
            mode=mode,
            manual_interfaces=interfaces,
            build_variant=build_variant,
        )


def _coerce_interfaces(value: Any) -> List[TypeRef]:
    if value is None:
        return []
    if isinstance(value, (TypeRef, type)):
        value = [value]
    elif not isinstance(value, (list, tuple)):
        logger.debug("Dropping interfaces value %r, not a sequence", value)
        return []
    interfaces = []
    for entry in value:
        if isinstance(entry, TypeRef):
            interfaces.append(entry)
        elif isinstance(entry, type):
            interfaces.append(TypeRef.from_type(entry))
        else:
            logger.debug("Dropping interface entry %r, not a type", entry)
    return interfaces


def _normalize_label(value: Any) -> Optional[str]:
    if value is None:
        return None
    label = str(value)
    if not label.strip():
        return None
    return label
