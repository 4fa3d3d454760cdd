from textwrap import dedent

MODULE_TEMPLATE = dedent(
    '''
    # <auto-generated />
    """Service registrations for {{ namespace | py_docstring }}.

    Generated by miraveja-registrar. Do not edit by hand.
    """

    from typing import Callable, Iterable, List

    {% for line in import_lines %}
    {{ line }}
    {% endfor %}

    AdditionalServices = Callable[[{{ collection_type }}], None]

    _additional_services: List[AdditionalServices] = []


    def register_additional_services(hook: AdditionalServices) -> AdditionalServices:
        """Add a hook that runs after the generated bindings, in the order hooks were added."""
        _additional_services.append(hook)
        return hook


    def register_services(
        services: {{ collection_type }},
        variants: Iterable[str] = (),
    ) -> {{ collection_type }}:
        """Bind every discovered service, then run the additional service hooks."""
    {% if uses_variants %}
        enabled_variants = frozenset(variants)
    {% endif %}

    {{ body }}

        for hook in _additional_services:
            hook(services)
        return services
    ''',
).lstrip()

GROUP_TEMPLATE = dedent(
    """
    # region {{ group.name }}
    {% for block in group.blocks %}
    {% if block.build_variant is not none %}
    if {{ block.build_variant | py_string }} in enabled_variants:
    {% for statement in block.statements %}
        {{ statement }}
    {% endfor %}
    {% else %}
    {% for statement in block.statements %}
    {{ statement }}
    {% endfor %}
    {% endif %}
    {% endfor %}
    # endregion
    """,
).strip()
