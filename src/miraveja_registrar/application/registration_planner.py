"""Application layer - Mode dispatch from registration intent to bindings."""

from typing import List

from miraveja_registrar.domain import (
    CanonicalAnnotation,
    DeclaredType,
    IRegistrationPlanner,
    PendingRegistration,
    RegistrationMode,
    TypeRef,
)


class RegistrationPlanner(IRegistrationPlanner):
    """Chooses the service types a declared type is bound to.

    Rules are evaluated in order and the first match wins:

    1. INSTANCE binds the type to itself.
    2. ALL_INTERFACES binds every implemented interface, in declared order.
    3. FIRST_INTERFACE binds the first implemented interface.
    4. AUTO behaves like FIRST_INTERFACE.
    5. MANUAL binds every explicitly listed interface, in listed order.
    6. Anything left (AUTO or FIRST_INTERFACE without interfaces, MANUAL
       without a list) binds the type to itself.

    Attributes:
        _strict_manual_interfaces: Drop MANUAL entries the type does not implement.
    """

    def __init__(self, strict_manual_interfaces: bool = False) -> None:
        """Initialize the planner.

        Args:
            strict_manual_interfaces: When True, MANUAL lists are filtered to the
                declared type's implemented interfaces.
        """
        self._strict_manual_interfaces = strict_manual_interfaces

    def plan(self, declared_type: DeclaredType, annotation: CanonicalAnnotation) -> List[PendingRegistration]:
        """Produce the ordered bindings for one annotation.

        Args:
            declared_type: The annotated type.
            annotation: The canonical annotation to plan.

        Returns:
            Bindings carrying the annotation's lifetime and build variant.

        Example:
            >>> planner = RegistrationPlanner()
            >>> [r.service_type.name for r in planner.plan(weather_service, all_interfaces)]
            ['IWeatherService', 'IForecastProvider']
        """
        return [
            PendingRegistration(
                group_name=declared_type.name,
                build_variant=annotation.build_variant,
                service_type=service_type,
                implementation_type=declared_type.type_ref,
                lifetime=annotation.lifetime,
            )
            for service_type in self._service_types(declared_type, annotation)
        ]

    def unimplemented_interfaces(self, declared_type: DeclaredType, annotation: CanonicalAnnotation) -> List[TypeRef]:
        """List the MANUAL entries the declared type does not implement.

        Returns an empty list for every other mode.
        """
        if annotation.mode != RegistrationMode.MANUAL:
            return []
        return [iface for iface in annotation.manual_interfaces if iface not in declared_type.interfaces]

    def _service_types(self, declared_type: DeclaredType, annotation: CanonicalAnnotation) -> List[TypeRef]:
        interfaces = declared_type.interfaces
        mode = annotation.mode

        if mode == RegistrationMode.INSTANCE:
            return [declared_type.type_ref]

        if mode == RegistrationMode.ALL_INTERFACES and interfaces:
            return list(interfaces)

        if mode in (RegistrationMode.FIRST_INTERFACE, RegistrationMode.AUTO) and interfaces:
            return [interfaces[0]]

        if mode == RegistrationMode.MANUAL:
            manual = annotation.manual_interfaces
            if self._strict_manual_interfaces:
                manual = [iface for iface in manual if iface in interfaces]
            if manual:
                return list(manual)

        # Fall back to binding the type to itself
        return [declared_type.type_ref]
