"""Tests for eager scoped feature index construction."""

from enum import Enum

import pytest
import structlog
from structlog.testing import LogCapture, capture_logs

from scoped_aggregates.features.descriptors import (
    FeatureDescriptor,
    FeatureSpec,
    build_continuous_feature,
)
from scoped_aggregates.features.personal_data import (
    PersonalDataType,
    derive_personal_data_types,
)
from scoped_aggregates.scoping.index import build_scoped_index
from scoped_aggregates.scoping.keys import scope_key_name


class SuggestType(Enum):
    """Example scope key type."""

    Recap = 1
    WhoToFollow = 2


class TestScopeKeyName:
    """Tests for canonical key rendering."""

    def test_enum_member(self) -> None:
        """Test that enum members render as their name."""
        assert scope_key_name(SuggestType.Recap) == "Recap"

    def test_plain_values(self) -> None:
        """Test that other keys use str()."""
        assert scope_key_name("Recap") == "Recap"
        assert scope_key_name(7) == "7"


class TestBuildScopedIndex:
    """Tests for build_scoped_index."""

    def test_cross_product_size(
        self, five_day_count: FeatureDescriptor, ten_day_count: FeatureDescriptor
    ) -> None:
        """Test that the index holds one entry per (feature, key) pair."""
        keys = ["A", "B", "C"]
        index = build_scoped_index(
            [five_day_count, ten_day_count], keys, "L", derive_personal_data_types
        )
        assert len(index) == 2 * 3
        assert len({feature.feature_id for feature in index.values()}) == 6

    def test_keyed_by_base_name_and_key(self, five_day_count: FeatureDescriptor) -> None:
        """Test lookup by (base feature name, key)."""
        index = build_scoped_index(
            [five_day_count],
            [SuggestType.Recap, SuggestType.WhoToFollow],
            "InjectionType",
            derive_personal_data_types,
        )
        scoped = index[(five_day_count.name, SuggestType.Recap)]
        assert scoped.name == "u.scoped.pair.any.any.5.days.count"
        assert scoped.extensions == (("scope_name", "InjectionType"), ("scope", "Recap"))
        assert scoped.extension_dimensions == ("scope_name", "scope")

    def test_inherits_personal_data_types(
        self, five_day_count: FeatureDescriptor
    ) -> None:
        """Test that scoped features keep the base feature's privacy tags."""
        index = build_scoped_index(
            [five_day_count], ["Recap"], "L", derive_personal_data_types
        )
        scoped = index[(five_day_count.name, "Recap")]
        assert scoped.personal_data_types == {PersonalDataType.USER_ID}

    def test_custom_personal_data_rule(self, ten_day_count: FeatureDescriptor) -> None:
        """Test that the supplied privacy rule is applied to the base feature."""
        seen: list[FeatureDescriptor | None] = []

        def rule(feature: FeatureDescriptor | None) -> set[PersonalDataType]:
            seen.append(feature)
            return {PersonalDataType.INFERRED_INTERESTS}

        index = build_scoped_index([ten_day_count], ["A", "B"], "L", rule)
        assert seen == [ten_day_count]
        assert all(
            f.personal_data_types == {PersonalDataType.INFERRED_INTERESTS}
            for f in index.values()
        )

    def test_custom_key_rendering(self, ten_day_count: FeatureDescriptor) -> None:
        """Test that key_to_str controls the scope extension."""
        index = build_scoped_index(
            [ten_day_count],
            [1, 2],
            "Bucket",
            derive_personal_data_types,
            key_to_str=lambda key: f"bucket_{key}",
        )
        assert index[(ten_day_count.name, 2)].extension("scope") == "bucket_2"

    def test_index_is_read_only(self, ten_day_count: FeatureDescriptor) -> None:
        """Test that the index cannot be mutated."""
        index = build_scoped_index(
            [ten_day_count], ["A"], "L", derive_personal_data_types
        )
        with pytest.raises(TypeError):
            index[("x", "A")] = ten_day_count  # type: ignore[index]

    def test_colliding_key_renderings_rejected(
        self, ten_day_count: FeatureDescriptor
    ) -> None:
        """Test that keys rendering to the same string raise."""
        with pytest.raises(ValueError, match="both render as"):
            build_scoped_index(
                [ten_day_count], [1, "1"], "L", derive_personal_data_types
            )

    def test_empty_inputs(self, ten_day_count: FeatureDescriptor) -> None:
        """Test that empty feature or key sets give an empty index."""
        assert len(build_scoped_index([], ["A"], "L", derive_personal_data_types)) == 0
        assert (
            len(build_scoped_index([ten_day_count], [], "L", derive_personal_data_types))
            == 0
        )

    def test_single_component_feature(self) -> None:
        """Test scoping a feature whose name has no periods."""
        feature = build_continuous_feature(FeatureSpec(name="x"))
        index = build_scoped_index([feature], ["K1"], "L", derive_personal_data_types)
        assert index[("x", "K1")].full_name == "x.scoped/scope_name=L/scope=K1"


class TestIndexLogging:
    """Tests for index construction log events."""

    def test_logs_index_size(self, ten_day_count: FeatureDescriptor) -> None:
        """Test that construction reports feature, key and index counts."""
        with capture_logs() as logs:
            build_scoped_index(
                [ten_day_count], ["A", "B"], "L", derive_personal_data_types
            )
        events = [entry for entry in logs if entry["event"] == "Built scoped feature index"]
        assert len(events) == 1
        assert events[0]["n_features"] == 1
        assert events[0]["n_keys"] == 2
        assert events[0]["size"] == 2

    def test_warns_on_large_index(self, ten_day_count: FeatureDescriptor) -> None:
        """Test that exceeding the size threshold logs a warning."""
        with capture_logs() as logs:
            build_scoped_index(
                [ten_day_count],
                ["A", "B", "C"],
                "L",
                derive_personal_data_types,
                size_warning_threshold=2,
            )
        warnings = [entry for entry in logs if entry["log_level"] == "warning"]
        assert len(warnings) == 1
        assert warnings[0]["threshold"] == 2

    def test_binds_scope_name_context(self, ten_day_count: FeatureDescriptor) -> None:
        """Test that index events carry the scope name from the log context."""
        capture = LogCapture()
        structlog.configure(
            processors=[structlog.contextvars.merge_contextvars, capture]
        )
        try:
            build_scoped_index(
                [ten_day_count], ["A"], "InjectionType", derive_personal_data_types
            )
        finally:
            structlog.reset_defaults()

        assert [entry["scope_name"] for entry in capture.entries] == ["InjectionType"]
        assert structlog.contextvars.get_contextvars() == {}
