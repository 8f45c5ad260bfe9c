"""Pytest configuration and shared fixtures."""

import pytest

from scoped_aggregates.features.descriptors import (
    FeatureDescriptor,
    FeatureSpec,
    build_continuous_feature,
)
from scoped_aggregates.features.personal_data import PersonalDataType
from scoped_aggregates.scoping.builder import ScopedAggregateBuilder

FIVE_DAY_COUNT = "u.pair.any.any.5.days.count"
TEN_DAY_COUNT = "u.pair.any.any.10.days.count"


@pytest.fixture
def five_day_count() -> FeatureDescriptor:
    """Base aggregate feature with privacy tags."""
    return build_continuous_feature(
        FeatureSpec(
            name=FIVE_DAY_COUNT,
            personal_data_types=frozenset({PersonalDataType.USER_ID}),
        )
    )


@pytest.fixture
def ten_day_count() -> FeatureDescriptor:
    """Base aggregate feature without privacy tags."""
    return build_continuous_feature(FeatureSpec(name=TEN_DAY_COUNT))


@pytest.fixture
def injection_builder(five_day_count: FeatureDescriptor) -> ScopedAggregateBuilder[str]:
    """Builder scoping one feature by injection type."""
    return ScopedAggregateBuilder(
        features_to_scope={five_day_count},
        scope_keys={"Recap", "WhoToFollow"},
        scope_name="InjectionType",
    )


@pytest.fixture
def two_feature_builder(
    five_day_count: FeatureDescriptor, ten_day_count: FeatureDescriptor
) -> ScopedAggregateBuilder[str]:
    """Builder scoping two features by injection type."""
    return ScopedAggregateBuilder(
        features_to_scope=[five_day_count, ten_day_count],
        scope_keys=["Recap", "WhoToFollow"],
        scope_name="InjectionType",
    )


@pytest.fixture
def config_yaml() -> str:
    """Minimal scoping configuration."""
    return """
scope_name: InjectionType
scope_keys: [Recap, WhoToFollow]
features:
  - name: u.pair.any.any.5.days.count
    personal_data_types: [user_id]
  - name: u.pair.any.any.10.days.count
"""
