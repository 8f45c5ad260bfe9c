"""
Scoped feature name composition.

    u.pair.any.any.5.days.count  ->  u.scoped.pair.any.any.5.days.count
                                     /scope_name=InjectionType/scope=Recap
"""

NAME_SEPARATOR = "."
SCOPED_TOKEN = "scoped"
SCOPE_NAME_EXTENSION = "scope_name"
SCOPE_EXTENSION = "scope"


def compose_scoped_name(
    base_name: str,
    scope_value: str,
    scope_label: str,
) -> tuple[str, list[tuple[str, str]]]:
    """
    Compose the scoped name and extensions for a base aggregate feature.

    The token ``scoped`` is inserted after the first period-separated
    component. Neither ``scope_value`` nor ``scope_label`` is escaped.

    Args:
        base_name: Base aggregate feature name.
        scope_value: Canonical string form of the scope key.
        scope_label: Label describing what the scope represents.

    Returns:
        Tuple of (scoped name, [("scope_name", label), ("scope", value)]).
    """
    head, *tail = base_name.split(NAME_SEPARATOR)
    new_name = NAME_SEPARATOR.join([head, SCOPED_TOKEN, *tail])
    extensions = [
        (SCOPE_NAME_EXTENSION, scope_label),
        (SCOPE_EXTENSION, scope_value),
    ]
    return new_name, extensions
