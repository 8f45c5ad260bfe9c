"""
Schema definitions using Pandera for tabular exports.

Feature contexts and scoped records leave this package as DataFrames;
both are validated here before they reach downstream consumers.
"""

from scoped_aggregates.schemas.feature_context import FeatureContextSchema
from scoped_aggregates.schemas.scoped_records import ScopedRecordsSchema

__all__ = [
    "FeatureContextSchema",
    "ScopedRecordsSchema",
]
