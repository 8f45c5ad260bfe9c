"""
Feature context: the set of features a consumer may see in records.
"""

from collections.abc import Iterable, Iterator

import pandas as pd

from scoped_aggregates.features.descriptors import FeatureDescriptor
from scoped_aggregates.features.naming import SCOPE_EXTENSION, SCOPE_NAME_EXTENSION
from scoped_aggregates.schemas.feature_context import FeatureContextSchema


class FeatureContext:
    """
    Immutable collection of feature descriptors.

    Iteration is ordered by full feature name.
    """

    def __init__(self, features: Iterable[FeatureDescriptor]) -> None:
        by_id = {feature.feature_id: feature for feature in features}
        self._features = tuple(sorted(by_id.values(), key=lambda f: f.full_name))
        self._by_id = by_id
        self._by_full_name = {f.full_name: f for f in self._features}

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self) -> Iterator[FeatureDescriptor]:
        return iter(self._features)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, FeatureDescriptor):
            return item.feature_id in self._by_id
        try:
            return item in self._by_id
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"FeatureContext({len(self)} features)"

    @property
    def feature_ids(self) -> frozenset[int]:
        """Ids of all features in the context."""
        return frozenset(self._by_id)

    def get(self, full_name: str) -> FeatureDescriptor:
        """
        Look up a feature by its full name.

        Raises:
            KeyError: If no feature has this name.
        """
        if full_name not in self._by_full_name:
            msg = f"Unknown feature '{full_name}'"
            raise KeyError(msg)
        return self._by_full_name[full_name]

    def by_id(self, feature_id: int) -> FeatureDescriptor:
        """
        Look up a feature by its numeric id.

        Raises:
            KeyError: If no feature has this id.
        """
        if feature_id not in self._by_id:
            msg = f"Unknown feature id {feature_id}"
            raise KeyError(msg)
        return self._by_id[feature_id]

    def to_frame(self) -> pd.DataFrame:
        """
        Tabulate the context, one row per feature.

        Returns:
            DataFrame validated against ``FeatureContextSchema``.
        """
        df = pd.DataFrame(
            {
                "feature_id": [f.feature_id for f in self._features],
                "name": [f.name for f in self._features],
                "full_name": [f.full_name for f in self._features],
                "feature_type": [f.feature_type.value for f in self._features],
                "scope_name": [
                    f.extension(SCOPE_NAME_EXTENSION) or "" for f in self._features
                ],
                "scope": [f.extension(SCOPE_EXTENSION) or "" for f in self._features],
                "personal_data_types": [
                    ",".join(sorted(t.value for t in f.personal_data_types))
                    for f in self._features
                ],
            }
        )
        return FeatureContextSchema.validate(df)
