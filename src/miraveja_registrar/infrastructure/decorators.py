from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar, Union

from miraveja_registrar.domain import AnnotationKind, Lifetime, RawAnnotation, RegistrationMode

T = TypeVar("T")

REGISTRATIONS_ATTRIBUTE = "__miraveja_registrations__"


def get_annotations(cls: Type) -> Tuple[RawAnnotation, ...]:
    """Return the registration annotations declared directly on a class.

    Annotations are not inherited: a subclass of a decorated class carries none
    unless it is decorated itself.

    Args:
        cls: The class to inspect.

    Returns:
        Annotations in source order (top decorator first).
    """
    return tuple(cls.__dict__.get(REGISTRATIONS_ATTRIBUTE, ()))


def _attach(annotation: RawAnnotation) -> Callable[[Type[T]], Type[T]]:
    def decorator(cls: Type[T]) -> Type[T]:
        # Decorators apply bottom-up, so prepend to keep source order
        setattr(cls, REGISTRATIONS_ATTRIBUTE, (annotation,) + get_annotations(cls))
        return cls

    return decorator


def _named(build_variant: Optional[str]) -> Dict[str, Any]:
    return {"build_variant": build_variant} if build_variant is not None else {}


def injectable(
    lifetime: Union[Lifetime, int],
    mode: Union[RegistrationMode, int] = RegistrationMode.AUTO,
    *interfaces: Type,
    build_variant: Optional[str] = None,
) -> Callable[[Type[T]], Type[T]]:
    """Mark a class for registration with an explicit lifetime.

    Args:
        lifetime: Lifetime of the produced bindings.
        mode: Strategy for choosing the service types.
        *interfaces: Explicit service types, used by MANUAL mode.
        build_variant: Optional build variant the bindings are restricted to.

    Returns:
        A class decorator.

    Example:
        >>> @injectable(Lifetime.SINGLETON, RegistrationMode.ALL_INTERFACES)
        ... class WeatherService(IWeatherService, IForecastProvider):
        ...     pass
    """
    return _attach(
        RawAnnotation(
            kind=AnnotationKind.INJECTABLE.value,
            positional=(lifetime, mode, interfaces),
            named=_named(build_variant),
        )
    )


def _lifetime_decorator(kind: AnnotationKind) -> Callable[..., Any]:
    def decorator(
        mode: Union[RegistrationMode, int, Type] = RegistrationMode.AUTO,
        *interfaces: Type,
        build_variant: Optional[str] = None,
    ) -> Any:
        # Bare usage: @transient_service
        if isinstance(mode, type) and not interfaces and build_variant is None:
            return _attach(RawAnnotation(kind=kind.value))(mode)
        return _attach(
            RawAnnotation(
                kind=kind.value,
                positional=(mode, interfaces),
                named=_named(build_variant),
            )
        )

    decorator.__name__ = kind.value
    decorator.__qualname__ = kind.value
    decorator.__doc__ = (
        f"Mark a class for {kind.implied_lifetime} registration.\n\n"
        "Usable bare or called with ``(mode, *interfaces, build_variant=None)``."
    )
    return decorator


transient_service = _lifetime_decorator(AnnotationKind.TRANSIENT_SERVICE)
scoped_service = _lifetime_decorator(AnnotationKind.SCOPED_SERVICE)
singleton_service = _lifetime_decorator(AnnotationKind.SINGLETON_SERVICE)
