"""
Pandera schema for scoped records in wide tabular form.

Column labels are full feature names, so columns are matched by regex.
"""

import pandera.pandas as pa

ScopedRecordsSchema = pa.DataFrameSchema(
    columns={
        r".+": pa.Column(
            float,
            nullable=True,
            regex=True,
            required=False,
            description="Scoped feature value (NaN when absent)",
        ),
    },
    name="ScopedRecordsSchema",
    strict=False,
    coerce=True,
)
