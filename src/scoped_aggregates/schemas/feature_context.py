"""
Pandera schema for the exported feature context table.
"""

import pandera.pandas as pa
from pandera.typing import Series


class FeatureContextSchema(pa.DataFrameModel):
    """
    Schema for a tabulated feature context.

    One row per feature descriptor; ids and full names are unique.
    """

    feature_id: Series[int] = pa.Field(
        unique=True,
        description="Numeric feature id (signed 64-bit)",
    )
    name: Series[str] = pa.Field(
        str_length={"min_value": 1},
        description="Structured feature name without extensions",
    )
    full_name: Series[str] = pa.Field(
        unique=True,
        description="Feature name with extension pairs",
    )
    feature_type: Series[str] = pa.Field(
        isin=["continuous"],
        description="Declared value type",
    )
    scope_name: Series[str] = pa.Field(
        description="Value of the scope_name extension (empty if unscoped)",
    )
    scope: Series[str] = pa.Field(
        description="Value of the scope extension (empty if unscoped)",
    )
    personal_data_types: Series[str] = pa.Field(
        description="Comma-separated privacy tags",
    )

    class Config:
        """Schema configuration."""

        name = "FeatureContextSchema"
        strict = True
        coerce = True
