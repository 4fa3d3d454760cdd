"""Application layer - Rendering of registrations as a Python module."""

import json
import logging
from textwrap import indent
from typing import Dict, List, Optional, Sequence, Set, Tuple

from jinja2 import Environment, StrictUndefined

from miraveja_registrar.application.templates import GROUP_TEMPLATE, MODULE_TEMPLATE
from miraveja_registrar.domain import (
    ISourceEmitter,
    OutputDocument,
    PendingRegistration,
    RegistrationBlock,
    RegistrationGroup,
    TypeRef,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER_MODULE = "miraveja_registrar"
DEFAULT_COLLECTION_TYPE = "IServiceCollection"

_INDENT = " " * 4
_MAX_LINE_LENGTH = 88
_BUILTINS_MODULE = "builtins"
_ALIAS_PREFIX = "_m"

# Names bound by the generated scaffold; user types with these names are module-qualified
_SCAFFOLD_NAMES = frozenset(
    {
        "AdditionalServices",
        "Callable",
        "Iterable",
        "List",
        "_additional_services",
        "enabled_variants",
        "frozenset",
        "hook",
        "register_additional_services",
        "register_services",
        "services",
        "variants",
    }
)


class SourceEmitter(ISourceEmitter):
    """Renders pending registrations into a deterministic registration module.

    Registrations are grouped by declared type in first-seen order. Inside a
    group the untagged block comes first, followed by one block per build
    variant in first-seen order; variant blocks are guarded at runtime by the
    ``variants`` passed to the generated ``register_services``.

    Attributes:
        _namespace: Package the registrations are generated for.
        _collection_ref: Service collection type the generated module imports.
    """

    def __init__(
        self,
        namespace: str,
        container_module: str = DEFAULT_CONTAINER_MODULE,
        collection_type: str = DEFAULT_COLLECTION_TYPE,
    ) -> None:
        """Initialize the emitter and compile its templates.

        Args:
            namespace: Package the registrations are generated for.
            container_module: Module exporting the service collection type.
            collection_type: Name of the service collection type.
        """
        self._namespace = namespace
        self._collection_ref = TypeRef(module=container_module, qualname=collection_type)
        self._env = Environment(
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.filters["py_string"] = json.dumps
        self._env.filters["py_docstring"] = _docstring_text
        self._module_template = self._env.from_string(MODULE_TEMPLATE)
        self._group_template = self._env.from_string(GROUP_TEMPLATE)

    def emit(self, registrations: Sequence[PendingRegistration]) -> OutputDocument:
        """Render every registration into one output document.

        Args:
            registrations: Registrations in accumulation order.

        Returns:
            The rendered document. Identical input always yields identical text.
        """
        display_names, modules, import_lines = self._plan_imports(registrations)
        groups = self._build_groups(registrations, display_names)

        body = "\n\n".join(indent(self._group_template.render(group=group), _INDENT) for group in groups)
        text = self._module_template.render(
            namespace=self._namespace,
            import_lines=import_lines,
            collection_type=display_names[self._collection_ref],
            uses_variants=any(block.build_variant is not None for group in groups for block in group.blocks),
            body=body,
        )

        logger.debug(
            "Rendered %d registrations in %d groups importing %d modules",
            len(registrations),
            len(groups),
            len(modules),
        )
        return OutputDocument(
            namespace=self._namespace,
            modules=modules,
            import_lines=import_lines,
            groups=groups,
            text=text,
        )

    def _plan_imports(
        self, registrations: Sequence[PendingRegistration]
    ) -> Tuple[Dict[TypeRef, str], List[str], List[str]]:
        """Choose a display name for every referenced type and the imports that bind them.

        A type is referenced by its bare qualified name unless its leading name is
        claimed by another module or by the scaffold, in which case it is
        referenced through its module. A module whose top-level package name is
        already bound in the generated module is imported under an alias.
        """
        refs: List[TypeRef] = [self._collection_ref]
        for registration in registrations:
            for ref in (registration.service_type, registration.implementation_type):
                if ref not in refs:
                    refs.append(ref)

        owners: Dict[str, Set[str]] = {}
        for ref in refs:
            if ref.module != _BUILTINS_MODULE:
                owners.setdefault(ref.head, set()).add(ref.module)

        display_names: Dict[TypeRef, str] = {}
        from_imports: Dict[str, Set[str]] = {}
        module_imports: Set[str] = set()
        qualified: List[TypeRef] = []
        for ref in refs:
            if ref.module == _BUILTINS_MODULE:
                display_names[ref] = ref.qualname
            elif len(owners[ref.head]) > 1 or ref.head in _SCAFFOLD_NAMES:
                qualified.append(ref)
                module_imports.add(ref.module)
            else:
                display_names[ref] = ref.qualname
                from_imports.setdefault(ref.module, set()).add(ref.head)

        bound_names = set(_SCAFFOLD_NAMES).union(*from_imports.values())
        aliases: Dict[str, str] = {}
        for module in sorted(module_imports):
            if module.split(".", 1)[0] in bound_names:
                aliases[module] = f"{_ALIAS_PREFIX}{len(aliases)}"
        for ref in qualified:
            display_names[ref] = f"{aliases.get(ref.module, ref.module)}.{ref.qualname}"

        modules = sorted(set(from_imports) | module_imports)
        import_lines = []
        for module in modules:
            if module in aliases:
                import_lines.append(f"import {module} as {aliases[module]}")
            elif module in module_imports:
                import_lines.append(f"import {module}")
            if module in from_imports:
                import_lines.append(_render_from_import(module, sorted(from_imports[module])))
        return display_names, modules, import_lines

    def _build_groups(
        self, registrations: Sequence[PendingRegistration], display_names: Dict[TypeRef, str]
    ) -> List[RegistrationGroup]:
        by_group: Dict[str, Dict[Optional[str], List[PendingRegistration]]] = {}
        for registration in registrations:
            by_group.setdefault(registration.group_name, {}).setdefault(registration.build_variant, []).append(
                registration
            )

        groups = []
        for group_name, by_variant in by_group.items():
            # Untagged registrations lead, then variants in first-seen order
            labels = sorted(by_variant, key=lambda label: label is not None)
            blocks = [
                RegistrationBlock(
                    build_variant=label,
                    registrations=by_variant[label],
                    statements=[_render_statement(r, display_names) for r in by_variant[label]],
                )
                for label in labels
            ]
            groups.append(RegistrationGroup(name=group_name, blocks=blocks))
        return groups


def _render_statement(registration: PendingRegistration, display_names: Dict[TypeRef, str]) -> str:
    service = display_names[registration.service_type]
    implementation = display_names[registration.implementation_type]
    return f"services.add_{registration.lifetime.value}({service}, {implementation})"


def _render_from_import(module: str, names: List[str]) -> str:
    line = f"from {module} import {', '.join(names)}"
    if len(line) <= _MAX_LINE_LENGTH:
        return line
    wrapped = "".join(f"{_INDENT}{name},\n" for name in names)
    return f"from {module} import (\n{wrapped})"


def _docstring_text(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')
