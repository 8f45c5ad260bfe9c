"""
Tabular export of scoped aggregate records.
"""

from collections.abc import Iterable

import numpy as np
import pandas as pd

from scoped_aggregates.records.data_record import DataRecord
from scoped_aggregates.schemas.scoped_records import ScopedRecordsSchema
from scoped_aggregates.scoping.context import FeatureContext


def records_to_frame(
    records: Iterable[DataRecord],
    context: FeatureContext,
) -> pd.DataFrame:
    """
    Convert scoped records into a wide DataFrame.

    One row per record and one float column per feature in the context,
    labeled with the feature's full name. Features absent from a record
    are NaN, never zero.

    Args:
        records: Records built by a ``ScopedAggregateBuilder``.
        context: Feature context describing the columns.

    Returns:
        DataFrame validated against ``ScopedRecordsSchema``.

    Raises:
        KeyError: If a record holds a feature id not in the context.
    """
    features = list(context)
    position = {feature.feature_id: i for i, feature in enumerate(features)}

    rows = []
    for record in records:
        row = np.full(len(features), np.nan)
        for feature_id, value in record.continuous_features.items():
            if feature_id not in position:
                msg = f"Feature id {feature_id} is not in the feature context"
                raise KeyError(msg)
            row[position[feature_id]] = value
        rows.append(row)

    df = pd.DataFrame(
        np.vstack(rows) if rows else np.empty((0, len(features))),
        columns=[feature.full_name for feature in features],
        dtype="float64",
    )
    return ScopedRecordsSchema.validate(df)
