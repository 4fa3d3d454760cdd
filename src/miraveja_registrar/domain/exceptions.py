from typing import Optional


class RegistrarException(Exception):
    """Base exception for registration generation errors."""


class ConfigurationError(RegistrarException):
    """Raised when a registration annotation cannot be interpreted.

    This occurs when:
    - The annotation kind tag is not one of the recognized kinds.

    Attributes:
        kind: The offending annotation kind tag.
        declared_type: Full name of the declared type carrying the annotation, when known.
        reason: Optional reason for the failure.
    """

    def __init__(self, kind: object, declared_type: Optional[str] = None, reason: Optional[str] = None) -> None:
        self.kind = kind
        self.declared_type = declared_type
        self.reason = reason
        message = f"Unrecognized registration annotation kind: {kind}"
        if declared_type:
            message += f" on {declared_type}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)

    def for_declared_type(self, declared_type: str) -> "ConfigurationError":
        """Return a copy of this error that names the declared type."""
        return ConfigurationError(self.kind, declared_type=declared_type, reason=self.reason)


class DiscoveryError(RegistrarException):
    """Raised when a module cannot be imported while scanning for declared types.

    Attributes:
        module_name: The module that failed to import.
        reason: Description of the underlying failure.
    """

    def __init__(self, module_name: str, reason: str) -> None:
        self.module_name = module_name
        self.reason = reason
        super().__init__(f"Cannot scan module {module_name}: {reason}")
