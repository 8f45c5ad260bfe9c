"""
Immutable feature descriptors.

A descriptor is identified by a numeric id derived from its full name,
i.e. the base name followed by its extension pairs:

    u.scoped.pair.any.any.5.days.count/scope_name=InjectionType/scope=Recap
"""

import hashlib
from dataclasses import dataclass, field
from enum import Enum

from scoped_aggregates.features.personal_data import PersonalDataType

EXTENSION_SEPARATOR = "/"


class FeatureType(str, Enum):
    """Declared value type of a feature."""

    CONTINUOUS = "continuous"


def render_full_name(name: str, extensions: tuple[tuple[str, str], ...]) -> str:
    """Render a feature name with its extension pairs appended."""
    parts = [name, *(f"{key}={value}" for key, value in extensions)]
    return EXTENSION_SEPARATOR.join(parts)


def feature_id_for(full_name: str) -> int:
    """
    Compute the deterministic numeric id for a feature.

    Uses the first 8 bytes of the MD5 digest as a signed 64-bit integer,
    so ids are stable across processes and machines.

    Args:
        full_name: Feature name including extensions.

    Returns:
        Signed 64-bit feature id.
    """
    digest = hashlib.md5(full_name.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], byteorder="big", signed=True)


@dataclass(frozen=True, eq=False)
class FeatureDescriptor:
    """
    Immutable description of a single feature.

    Equality and hashing use the numeric id only.

    Attributes:
        feature_id: Unique numeric identifier.
        name: Structured, period-separated feature name.
        feature_type: Declared value type.
        personal_data_types: Privacy classification tags.
        extension_dimensions: Declared extension keys (duplicates allowed).
        extensions: Ordered extension (key, value) pairs.
    """

    feature_id: int
    name: str
    feature_type: FeatureType = FeatureType.CONTINUOUS
    personal_data_types: frozenset[PersonalDataType] = frozenset()
    extension_dimensions: tuple[str, ...] = ()
    extensions: tuple[tuple[str, str], ...] = ()

    @property
    def full_name(self) -> str:
        """Name with extension pairs, e.g. ``a.b/scope=x``."""
        return render_full_name(self.name, self.extensions)

    def extension(self, key: str) -> str | None:
        """Value of the first extension with the given key, if any."""
        for ext_key, value in self.extensions:
            if ext_key == key:
                return value
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureDescriptor):
            return NotImplemented
        return self.feature_id == other.feature_id

    def __hash__(self) -> int:
        return hash(self.feature_id)

    def __repr__(self) -> str:
        return f"FeatureDescriptor({self.full_name!r}, id={self.feature_id})"


@dataclass(frozen=True)
class FeatureSpec:
    """
    Configuration for constructing a feature descriptor.

    Attributes:
        name: Structured feature name.
        extension_dimensions: Extension keys the feature declares.
        personal_data_types: Privacy classification tags.
        extensions: Ordered extension (key, value) pairs.
        feature_id: Explicit id; derived from the full name when omitted.
    """

    name: str
    extension_dimensions: tuple[str, ...] = ()
    personal_data_types: frozenset[PersonalDataType] = field(default_factory=frozenset)
    extensions: tuple[tuple[str, str], ...] = ()
    feature_id: int | None = None


def build_continuous_feature(spec: FeatureSpec) -> FeatureDescriptor:
    """
    Build a continuous (numeric) feature descriptor from a spec.

    Args:
        spec: Descriptor configuration.

    Returns:
        New immutable descriptor.
    """
    if not spec.name:
        msg = "Feature name must not be empty"
        raise ValueError(msg)

    extensions = tuple((str(key), str(value)) for key, value in spec.extensions)
    feature_id = spec.feature_id
    if feature_id is None:
        feature_id = feature_id_for(render_full_name(spec.name, extensions))

    return FeatureDescriptor(
        feature_id=feature_id,
        name=spec.name,
        feature_type=FeatureType.CONTINUOUS,
        personal_data_types=frozenset(spec.personal_data_types),
        extension_dimensions=tuple(spec.extension_dimensions),
        extensions=extensions,
    )
