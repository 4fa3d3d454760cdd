from enum import Enum
from typing import Any, Optional


class Lifetime(str, Enum):
    """Defines the lifetime of a registered service binding.

    Attributes:
        SINGLETON: Single instance shared for the lifetime of the container.
        SCOPED: Single instance per container scope.
        TRANSIENT: New instance created on each request.
    """

    SINGLETON = "singleton"
    SCOPED = "scoped"
    TRANSIENT = "transient"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Any) -> "Lifetime":
        """Convert a lifetime member, value string or ordinal code to a Lifetime.

        Ordinal codes follow the legacy encoding (0=singleton, 1=scoped, 2=transient).
        Anything unrecognised falls back to TRANSIENT.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return _LIFETIME_ORDINALS.get(value, cls.TRANSIENT)
        if isinstance(value, str):
            return _member_by_value(cls, value) or cls.TRANSIENT
        return cls.TRANSIENT


class RegistrationMode(str, Enum):
    """Strategy used to pick the service type(s) a class is bound to.

    Attributes:
        AUTO: First implemented interface if any, otherwise the class itself.
        FIRST_INTERFACE: The first implemented interface.
        ALL_INTERFACES: Every implemented interface, in declaration order.
        INSTANCE: The class itself.
        MANUAL: The interfaces listed on the decorator.
    """

    AUTO = "auto"
    FIRST_INTERFACE = "first_interface"
    ALL_INTERFACES = "all_interfaces"
    INSTANCE = "instance"
    MANUAL = "manual"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Any) -> "RegistrationMode":
        """Convert a mode member, value string or ordinal code to a RegistrationMode.

        Ordinal codes follow declaration order (0=auto ... 4=manual).
        Anything unrecognised falls back to AUTO.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return _MODE_ORDINALS.get(value, cls.AUTO)
        if isinstance(value, str):
            return _member_by_value(cls, value) or cls.AUTO
        return cls.AUTO


class AnnotationKind(str, Enum):
    """Closed set of registration decorator kinds.

    INJECTABLE carries its lifetime as the first positional value; the
    specialised kinds imply a fixed lifetime.
    """

    INJECTABLE = "injectable"
    TRANSIENT_SERVICE = "transient_service"
    SCOPED_SERVICE = "scoped_service"
    SINGLETON_SERVICE = "singleton_service"

    def __str__(self) -> str:
        return self.value

    @property
    def implied_lifetime(self) -> Optional[Lifetime]:
        return _IMPLIED_LIFETIMES.get(self)


class DiagnosticSeverity(str, Enum):
    """Severity attached to a diagnostic event."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    def __str__(self) -> str:
        return self.value


class DiagnosticCode(str, Enum):
    """Codes reported to the host during a generation pass."""

    START = "START"
    FOUND = "FOUND"
    MISSING_BASE_KIND = "MISSING_BASE_KIND"
    EMPTY_RESULT = "EMPTY_RESULT"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    MANUAL_INTERFACE_SKIPPED = "MANUAL_INTERFACE_SKIPPED"
    COMPLETE = "COMPLETE"

    def __str__(self) -> str:
        return self.value


def _member_by_value(enum_cls, value: str):
    for member in enum_cls:
        if member.value == value.lower():
            return member
    return None


_LIFETIME_ORDINALS = {
    0: Lifetime.SINGLETON,
    1: Lifetime.SCOPED,
    2: Lifetime.TRANSIENT,
}

_MODE_ORDINALS = dict(enumerate(RegistrationMode))

_IMPLIED_LIFETIMES = {
    AnnotationKind.TRANSIENT_SERVICE: Lifetime.TRANSIENT,
    AnnotationKind.SCOPED_SERVICE: Lifetime.SCOPED,
    AnnotationKind.SINGLETON_SERVICE: Lifetime.SINGLETON,
}
