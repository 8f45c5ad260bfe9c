"""
Scoped aggregates: key-scoped feature records for ML feature pipelines.

This package turns key-partitioned aggregate feature maps into a single
record of "scoped" features, one per (base feature, scope key) pair.
"""

from importlib.metadata import version

from scoped_aggregates.features.descriptors import (
    FeatureDescriptor,
    FeatureSpec,
    FeatureType,
    build_continuous_feature,
)
from scoped_aggregates.features.naming import compose_scoped_name
from scoped_aggregates.features.personal_data import (
    PersonalDataType,
    derive_personal_data_types,
)
from scoped_aggregates.records.data_record import CompactDataRecord, DataRecord
from scoped_aggregates.scoping.builder import ScopedAggregateBuilder
from scoped_aggregates.scoping.context import FeatureContext

__version__ = version("scoped-aggregates")

__all__ = [
    "CompactDataRecord",
    "DataRecord",
    "FeatureContext",
    "FeatureDescriptor",
    "FeatureSpec",
    "FeatureType",
    "PersonalDataType",
    "ScopedAggregateBuilder",
    "__version__",
    "build_continuous_feature",
    "compose_scoped_name",
    "derive_personal_data_types",
]
