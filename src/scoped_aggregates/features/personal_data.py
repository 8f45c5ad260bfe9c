"""
Privacy classification tags attached to feature descriptors.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scoped_aggregates.features.descriptors import FeatureDescriptor


class PersonalDataType(str, Enum):
    """Categories of personal data a feature may carry."""

    USER_ID = "user_id"
    ENGAGEMENT_HISTORY = "engagement_history"
    ENGAGEMENT_METADATA = "engagement_metadata"
    PRIVATE_ENGAGEMENTS = "private_engagements"
    PUBLIC_ENGAGEMENTS = "public_engagements"
    INFERRED_INTERESTS = "inferred_interests"
    COUNTS_OF_PRIVATE_ACTIONS = "counts_of_private_actions"
    COUNTS_OF_PUBLIC_ACTIONS = "counts_of_public_actions"


def derive_personal_data_types(
    feature: "FeatureDescriptor | None",
) -> frozenset[PersonalDataType]:
    """
    Derive the privacy tags for an aggregate feature.

    Scoped features inherit the tags of the base feature unchanged.

    Args:
        feature: Base feature, or None.

    Returns:
        The feature's tags, or an empty set when no feature is given.
    """
    if feature is None:
        return frozenset()
    return frozenset(feature.personal_data_types)
