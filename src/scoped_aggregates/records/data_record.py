"""
Record containers.

``DataRecord`` is the canonical in-memory record: continuous features
keyed by 64-bit feature id with float values. ``CompactDataRecord`` is
the wire-oriented variant whose continuous section may be absent and
whose ids and values are numpy scalars (single-precision values).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np

ContinuousFeaturesMap = dict[int, float]


@dataclass
class DataRecord:
    """Record with a continuous feature section (feature id -> value)."""

    continuous_features: ContinuousFeaturesMap = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.continuous_features)

    def get(self, feature_id: int) -> float | None:
        """Value of a continuous feature, or None when absent."""
        return self.continuous_features.get(feature_id)


@dataclass(frozen=True)
class CompactDataRecord:
    """
    Record with an optional, narrowly typed continuous feature section.

    Attributes:
        continuous_features: Mapping of feature id to value, or None.
            Ids are typically ``numpy.int64`` and values ``numpy.float32``.
    """

    continuous_features: Mapping[Any, Any] | None = None

    @classmethod
    def from_features(cls, features: Mapping[int, float]) -> "CompactDataRecord":
        """Pack a plain feature map into numpy scalar types."""
        return cls(
            continuous_features={
                np.int64(feature_id): np.float32(value)
                for feature_id, value in features.items()
            }
        )
