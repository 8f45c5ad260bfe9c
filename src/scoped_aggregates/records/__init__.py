"""
Record containers moved between pipeline stages, and the adapters that
normalize them into plain ``{feature_id: value}`` maps.
"""

from scoped_aggregates.records.adapters import (
    continuous_features_from_compact_record,
    continuous_features_from_record,
)
from scoped_aggregates.records.data_record import (
    CompactDataRecord,
    ContinuousFeaturesMap,
    DataRecord,
)

__all__ = [
    "CompactDataRecord",
    "ContinuousFeaturesMap",
    "DataRecord",
    "continuous_features_from_compact_record",
    "continuous_features_from_record",
]
