"""
Ingestion adapters.

Both adapters return a fresh ``{int: float}`` map so that the two
record representations feed the same aggregate-building core.
"""

import operator
from collections.abc import Mapping
from typing import Any

from scoped_aggregates.records.data_record import (
    CompactDataRecord,
    ContinuousFeaturesMap,
    DataRecord,
)


def _widen(features: Mapping[Any, Any]) -> ContinuousFeaturesMap:
    result: ContinuousFeaturesMap = {}
    for feature_id, value in features.items():
        try:
            result[operator.index(feature_id)] = float(value)
        except (TypeError, ValueError) as e:
            msg = f"Cannot convert continuous feature {feature_id!r}={value!r}"
            raise ValueError(msg) from e
    return result


def continuous_features_from_record(record: DataRecord) -> ContinuousFeaturesMap:
    """
    Extract the continuous feature map from a ``DataRecord``.

    Args:
        record: Record whose continuous section is always present.

    Returns:
        Feature id -> value map.

    Raises:
        ValueError: If an id or value cannot be converted.
    """
    return _widen(record.continuous_features)


def continuous_features_from_compact_record(
    record: CompactDataRecord,
) -> ContinuousFeaturesMap:
    """
    Extract the continuous feature map from a ``CompactDataRecord``.

    A missing continuous section is treated as an empty map.

    Args:
        record: Record with optional, narrowly typed continuous section.

    Returns:
        Feature id -> value map with Python ``int``/``float`` types.

    Raises:
        ValueError: If an id or value cannot be converted.
    """
    if record.continuous_features is None:
        return {}
    return _widen(record.continuous_features)
