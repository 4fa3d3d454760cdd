import importlib
import inspect
import logging
import pkgutil
from abc import ABC, ABCMeta
from types import ModuleType
from typing import Generic, Iterable, Iterator, List, Protocol, Type

from miraveja_registrar.domain import DeclaredType, DiscoveryError, TypeRef
from miraveja_registrar.infrastructure.decorators import get_annotations

logger = logging.getLogger(__name__)

_IGNORED_BASES = (object, ABC, Protocol, Generic)


def contract_types(cls: Type) -> List[TypeRef]:
    """Return the contracts a class directly implements, in base declaration order.

    A direct base counts as a contract when it is abstract, a protocol, or a
    direct ``ABC`` subclass (a marker interface without abstract methods).

    Args:
        cls: The class to inspect.

    Returns:
        References to the implemented contracts.
    """
    contracts = []
    for base in cls.__bases__:
        if base in _IGNORED_BASES:
            continue
        if _is_contract(base):
            contracts.append(TypeRef.from_type(base))
    return contracts


def _is_contract(base: Type) -> bool:
    if getattr(base, "_is_protocol", False):
        return True
    if not isinstance(base, ABCMeta):
        return False
    return inspect.isabstract(base) or ABC in base.__bases__


def describe(cls: Type) -> DeclaredType:
    """Describe a class as a declared type with its contracts and annotations."""
    return DeclaredType(
        type_ref=TypeRef.from_type(cls),
        interfaces=contract_types(cls),
        annotations=list(get_annotations(cls)),
    )


class TypeScanner:
    """Enumerates declared types from importable packages.

    Modules are visited in sorted name order and classes in definition order,
    so a given source tree always yields the same sequence.
    """

    def scan_packages(self, package_names: Iterable[str]) -> List[DeclaredType]:
        """Import packages with all their submodules and describe every class they define.

        Args:
            package_names: Dotted names of packages or plain modules.

        Returns:
            Declared types in enumeration order.

        Raises:
            DiscoveryError: If a package or one of its submodules cannot be imported.
        """
        declared_types: List[DeclaredType] = []
        seen_modules = set()
        for package_name in package_names:
            for module in self._iter_modules(package_name):
                if module.__name__ in seen_modules:
                    continue
                seen_modules.add(module.__name__)
                declared_types.extend(self.scan_module(module))
        return declared_types

    def scan_module(self, module: ModuleType) -> List[DeclaredType]:
        """Describe every class defined in a module, including nested classes."""
        declared_types = [describe(cls) for cls in _iter_classes(module.__name__, vars(module).values(), "")]
        logger.debug("Scanned %s: %d classes", module.__name__, len(declared_types))
        return declared_types

    def _iter_modules(self, package_name: str) -> Iterator[ModuleType]:
        package = _import(package_name)
        yield package

        search_path = getattr(package, "__path__", None)
        if search_path is None:
            return

        walker = pkgutil.walk_packages(search_path, prefix=f"{package_name}.", onerror=_raise_walk_error)
        names = sorted(info.name for info in walker)
        for name in names:
            yield _import(name)


def _import(module_name: str) -> ModuleType:
    try:
        return importlib.import_module(module_name)
    except Exception as e:
        raise DiscoveryError(module_name, str(e)) from e


def _raise_walk_error(module_name: str) -> None:
    raise DiscoveryError(module_name, "import failed while walking the package")


def _iter_classes(module_name: str, namespace: Iterable[object], owner_qualname: str) -> Iterator[Type]:
    prefix = f"{owner_qualname}." if owner_qualname else ""
    seen = set()
    for value in namespace:
        if not inspect.isclass(value) or value.__module__ != module_name or id(value) in seen:
            continue
        # Skip aliases bound under another owner
        if value.__qualname__ != f"{prefix}{value.__name__}":
            continue
        seen.add(id(value))
        yield value
        yield from _iter_classes(module_name, vars(value).values(), value.__qualname__)
