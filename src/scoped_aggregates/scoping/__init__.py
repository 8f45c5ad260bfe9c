"""
Key-scoped aggregate building.

The scoped feature index is built eagerly once; record building and
schema export only read it.
"""

from scoped_aggregates.scoping.builder import ScopedAggregateBuilder
from scoped_aggregates.scoping.context import FeatureContext
from scoped_aggregates.scoping.frame import records_to_frame
from scoped_aggregates.scoping.index import build_scoped_index
from scoped_aggregates.scoping.keys import scope_key_name

__all__ = [
    "FeatureContext",
    "ScopedAggregateBuilder",
    "build_scoped_index",
    "records_to_frame",
    "scope_key_name",
]
