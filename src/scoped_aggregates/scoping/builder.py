"""
Scoped aggregate builder.

Base features produced by the aggregation framework are re-labeled under
a scope key. Given

    features   = {"user_injection_aggregate.pair.any_label.any_feature.5.days.count"}
    scope_keys = {SuggestType.Recap, SuggestType.WhoToFollow}
    scope_name = "InjectionType"

the builder generates features such as

    user_injection_aggregate.scoped.pair.any_label.any_feature.5.days.count
        /scope_name=InjectionType/scope=Recap

whose value in an output record is the value of the base feature in the
partition for that key.
"""

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import TYPE_CHECKING, Generic, TypeVar

from scoped_aggregates.features.descriptors import FeatureDescriptor
from scoped_aggregates.features.personal_data import derive_personal_data_types
from scoped_aggregates.records.adapters import (
    continuous_features_from_compact_record,
    continuous_features_from_record,
)
from scoped_aggregates.records.data_record import (
    CompactDataRecord,
    ContinuousFeaturesMap,
    DataRecord,
)
from scoped_aggregates.scoping.context import FeatureContext
from scoped_aggregates.scoping.index import (
    DEFAULT_SIZE_WARNING_THRESHOLD,
    PersonalDataTypeRule,
    ScopedFeatureIndex,
    build_scoped_index,
)
from scoped_aggregates.scoping.keys import scope_key_name
from scoped_aggregates.utils.logging import get_logger

if TYPE_CHECKING:
    from scoped_aggregates.config.settings import ScopingConfig

log = get_logger(__name__)

K = TypeVar("K", bound=Hashable)


class ScopedAggregateBuilder(Generic[K]):
    """
    Builds records of key-scoped aggregate features.

    The scoped feature index is computed once at construction and never
    mutated afterwards, so a builder can be shared between threads.
    """

    def __init__(
        self,
        features_to_scope: Iterable[FeatureDescriptor],
        scope_keys: Iterable[K],
        scope_name: str,
        personal_data_type_rule: PersonalDataTypeRule = derive_personal_data_types,
        key_to_str: Callable[[K], str] = scope_key_name,
        size_warning_threshold: int = DEFAULT_SIZE_WARNING_THRESHOLD,
    ) -> None:
        """
        Initialize the builder and its scoped feature index.

        Args:
            features_to_scope: Base features to generate scoped versions of.
            scope_keys: Keys to generate scopes with.
            scope_name: What the scopes represent; added to every scoped feature.
            personal_data_type_rule: Privacy tags for a base feature.
            key_to_str: Canonical string form of a scope key.
            size_warning_threshold: Index size above which a warning is logged.
        """
        self.features_to_scope = tuple(features_to_scope)
        self.scope_keys = frozenset(scope_keys)
        self.scope_name = scope_name
        self._index = build_scoped_index(
            self.features_to_scope,
            self.scope_keys,
            scope_name,
            personal_data_type_rule,
            key_to_str=key_to_str,
            size_warning_threshold=size_warning_threshold,
        )

    @classmethod
    def from_config(
        cls,
        config: "ScopingConfig",
        features: Iterable[FeatureDescriptor] | None = None,
    ) -> "ScopedAggregateBuilder[str]":
        """
        Create a builder from a scoping configuration.

        Args:
            config: Validated scoping configuration.
            features: Base features to use instead of those in the config.

        Returns:
            Builder keyed by the configured string scope keys.
        """
        if features is None:
            features = config.base_features()
        return cls(
            features,
            config.scope_keys,
            config.scope_name,
            size_warning_threshold=config.size_warning_threshold,
        )

    @property
    def index(self) -> ScopedFeatureIndex:
        """Read-only (base feature name, key) -> scoped feature index."""
        return self._index

    def scoped_feature(self, feature_name: str, key: K) -> FeatureDescriptor | None:
        """Scoped descriptor for a base feature name and key, if supported."""
        return self._index.get((feature_name, key))

    def build_aggregates(
        self, feature_maps_by_key: Mapping[K, Mapping[int, float]]
    ) -> DataRecord:
        """
        Create key-scoped features from raw feature maps partitioned by key.

        Keys outside the configured scope keys and features missing from a
        partition produce no output.

        Args:
            feature_maps_by_key: Key -> (base feature id -> value).

        Returns:
            New record holding scoped feature id -> value.
        """
        continuous_features: ContinuousFeaturesMap = {}
        for key, feature_map in feature_maps_by_key.items():
            for feature in self.features_to_scope:
                scoped = self._index.get((feature.name, key))
                if scoped is None:
                    continue
                value = feature_map.get(feature.feature_id)
                if value is None:
                    continue
                continuous_features[scoped.feature_id] = value

        log.debug(
            "Built scoped aggregates",
            n_partitions=len(feature_maps_by_key),
            n_features=len(continuous_features),
        )
        return DataRecord(continuous_features=continuous_features)

    def build_aggregates_from_records(
        self, records_by_key: Mapping[K, DataRecord]
    ) -> DataRecord:
        """
        Create key-scoped features from ``DataRecord`` aggregates by key.

        For example, with key ``Recap`` and base feature
        ``xyz.pair.any_label.any_feature.5.days.count``, the output holds
        ``xyz.scoped.pair.any_label.any_feature.5.days.count/scope_name=InjectionType/scope=Recap``
        with the base feature's value from the ``Recap`` record.

        Raises:
            ValueError: If a record's features cannot be converted.
        """
        return self.build_aggregates(
            {
                key: continuous_features_from_record(record)
                for key, record in records_by_key.items()
            }
        )

    def build_aggregates_from_compact_records(
        self, records_by_key: Mapping[K, CompactDataRecord]
    ) -> DataRecord:
        """
        Create key-scoped features from ``CompactDataRecord`` aggregates by key.

        Records without a continuous section contribute nothing.

        Raises:
            ValueError: If a record's features cannot be converted.
        """
        return self.build_aggregates(
            {
                key: continuous_features_from_compact_record(record)
                for key, record in records_by_key.items()
            }
        )

    @property
    def scoped_feature_context(self) -> FeatureContext:
        """All scoped features this builder can generate."""
        return FeatureContext(self._index.values())
