"""
Eager construction of the (base feature name, scope key) -> scoped
feature index.

The index holds |features| x |keys| descriptors for the lifetime of the
builder that owns it, so memory grows linearly with key cardinality.
"""

from collections.abc import Callable, Hashable, Iterable, Mapping
from types import MappingProxyType
from typing import TypeVar

from scoped_aggregates.features.descriptors import (
    FeatureDescriptor,
    FeatureSpec,
    build_continuous_feature,
)
from scoped_aggregates.features.naming import (
    SCOPE_EXTENSION,
    SCOPE_NAME_EXTENSION,
    compose_scoped_name,
)
from scoped_aggregates.features.personal_data import PersonalDataType
from scoped_aggregates.scoping.keys import scope_key_name
from scoped_aggregates.utils.logging import get_logger, log_context

log = get_logger(__name__)

K = TypeVar("K", bound=Hashable)

PersonalDataTypeRule = Callable[[FeatureDescriptor | None], Iterable[PersonalDataType]]
ScopedFeatureIndex = Mapping[tuple[str, K], FeatureDescriptor]

DEFAULT_SIZE_WARNING_THRESHOLD = 1_000_000


def build_scoped_feature(
    base_name: str,
    scope_value: str,
    scope_name: str,
    personal_data_types: Iterable[PersonalDataType],
) -> FeatureDescriptor:
    """Build the scoped descriptor for one (feature, key) pair."""
    new_name, extensions = compose_scoped_name(base_name, scope_value, scope_name)
    return build_continuous_feature(
        FeatureSpec(
            name=new_name,
            extension_dimensions=(SCOPE_NAME_EXTENSION, SCOPE_EXTENSION),
            personal_data_types=frozenset(personal_data_types),
            extensions=tuple(extensions),
        )
    )


def _render_keys(keys: Iterable[K], key_to_str: Callable[[K], str]) -> dict[K, str]:
    rendered: dict[K, str] = {}
    seen: dict[str, K] = {}
    for key in keys:
        value = key_to_str(key)
        if value in seen and seen[value] != key:
            msg = (
                f"Scope keys {seen[value]!r} and {key!r} both render as {value!r}; "
                "their scoped features would share ids"
            )
            raise ValueError(msg)
        seen[value] = key
        rendered[key] = value
    return rendered


def build_scoped_index(
    features: Iterable[FeatureDescriptor],
    keys: Iterable[K],
    scope_name: str,
    personal_data_type_rule: PersonalDataTypeRule,
    key_to_str: Callable[[K], str] = scope_key_name,
    size_warning_threshold: int = DEFAULT_SIZE_WARNING_THRESHOLD,
) -> ScopedFeatureIndex:
    """
    Build the full cross product of scoped feature descriptors.

    Args:
        features: Base aggregate features to scope.
        keys: Scope keys to support.
        scope_name: Label embedded as the ``scope_name`` extension.
        personal_data_type_rule: Maps a base feature to its privacy tags;
            scoped features inherit them unchanged.
        key_to_str: Canonical key rendering.
        size_warning_threshold: Index size above which a warning is logged.

    Returns:
        Read-only mapping of (base feature name, key) -> scoped descriptor.

    Raises:
        ValueError: If two distinct keys render to the same string.
    """
    features = tuple(features)
    rendered_keys = _render_keys(keys, key_to_str)

    index: dict[tuple[str, K], FeatureDescriptor] = {}
    with log_context(scope_name=scope_name):
        for feature in features:
            personal_data_types = frozenset(personal_data_type_rule(feature))
            for key, scope_value in rendered_keys.items():
                index[(feature.name, key)] = build_scoped_feature(
                    feature.name, scope_value, scope_name, personal_data_types
                )

        log.info(
            "Built scoped feature index",
            n_features=len(features),
            n_keys=len(rendered_keys),
            size=len(index),
        )
        if len(index) > size_warning_threshold:
            log.warning(
                "Scoped feature index is large",
                size=len(index),
                threshold=size_warning_threshold,
            )

    return MappingProxyType(index)
