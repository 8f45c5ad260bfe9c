"""Tests for scoped feature name composition."""

import pytest

from scoped_aggregates.features.naming import compose_scoped_name


class TestComposeScopedName:
    """Tests for compose_scoped_name."""

    @pytest.mark.parametrize(
        ("base_name", "expected"),
        [
            ("a.b", "a.scoped.b"),
            ("u.pair.any.any.5.days.count", "u.scoped.pair.any.any.5.days.count"),
            (
                "user_injection_aggregate.pair.any_label.any_feature.10.days.count",
                "user_injection_aggregate.scoped.pair.any_label.any_feature.10.days.count",
            ),
        ],
    )
    def test_inserts_after_first_component(self, base_name: str, expected: str) -> None:
        """Test that 'scoped' follows the first period-separated component."""
        new_name, _ = compose_scoped_name(base_name, "K1", "L")
        assert new_name == expected

    def test_single_component(self) -> None:
        """Test that a name without periods still composes."""
        new_name, _ = compose_scoped_name("x", "K1", "L")
        assert new_name == "x.scoped"

    def test_extensions_order(self) -> None:
        """Test that scope_name precedes scope."""
        _, extensions = compose_scoped_name("a.b", "K1", "L")
        assert extensions == [("scope_name", "L"), ("scope", "K1")]

    def test_no_escaping(self) -> None:
        """Test that periods in the scope value are kept verbatim."""
        new_name, extensions = compose_scoped_name("a.b", "x.y", "L.M")
        assert new_name == "a.scoped.b"
        assert extensions == [("scope_name", "L.M"), ("scope", "x.y")]

    def test_deterministic(self) -> None:
        """Test that repeated composition gives identical results."""
        assert compose_scoped_name("a.b.c", "Recap", "InjectionType") == (
            compose_scoped_name("a.b.c", "Recap", "InjectionType")
        )
