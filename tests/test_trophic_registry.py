"""Tests for trophic levels and the predator-prey registry."""

import logging

import pytest

from ecosse.foodweb import TrophicLevel, TrophicRegistry
from ecosse.foodweb.trophic import coerce_level


class TestTrophicLevel:
    def test_values(self) -> None:
        assert [level.value for level in TrophicLevel] == [-1, 0, 1, 2, 3, 4]

    def test_ordered_levels(self) -> None:
        assert TrophicLevel.TERTIARY.is_ordered
        assert not TrophicLevel.DECOMPOSER.is_ordered
        assert not TrophicLevel.UNKNOWN.is_ordered

    def test_coerce_unrecognised_value(self) -> None:
        assert coerce_level(2) is TrophicLevel.SECONDARY
        assert coerce_level(42) is TrophicLevel.UNKNOWN


class TestTrophicRegistry:
    def test_defaults(self) -> None:
        registry = TrophicRegistry.with_defaults()
        assert registry.registered_types() == ["plant", "creature", "predator", "tribe", "fungus"]
        assert registry.trophic_level_of("tribe") is TrophicLevel.TERTIARY
        assert registry.trophic_level_of("fungus") is TrophicLevel.DECOMPOSER
        assert registry.prey_types_for("tribe") == {"creature", "plant"}

    def test_unregistered_type_is_unknown(self, simple_registry: TrophicRegistry) -> None:
        assert simple_registry.trophic_level_of("dragon") is TrophicLevel.UNKNOWN
        assert "dragon" not in simple_registry

    def test_predator_prey_pairs_are_directional(self, simple_registry: TrophicRegistry) -> None:
        assert simple_registry.is_predator_prey_pair("wolf", "herbivore")
        assert not simple_registry.is_predator_prey_pair("herbivore", "wolf")
        assert not simple_registry.is_predator_prey_pair("wolf", "plant")

    def test_reverse_lookup(self, simple_registry: TrophicRegistry) -> None:
        simple_registry.register_type("bear", TrophicLevel.SECONDARY, ["herbivore", "plant"])
        assert simple_registry.predator_types_for("herbivore") == {"wolf", "bear"}
        assert simple_registry.predator_types_for("wolf") == set()

    def test_register_overwrites(self, simple_registry: TrophicRegistry) -> None:
        simple_registry.register_type("wolf", TrophicLevel.TERTIARY, ["plant"])
        assert simple_registry.trophic_level_of("wolf") is TrophicLevel.TERTIARY
        assert simple_registry.prey_types_for("wolf") == {"plant"}
        assert len(simple_registry) == 3

    def test_producer_prey_is_dropped(
        self, simple_registry: TrophicRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            simple_registry.register_type("moss", TrophicLevel.PRODUCER, ["plant"])
        assert simple_registry.prey_types_for("moss") == set()
        assert "Ignoring prey" in caplog.text

    def test_types_at_level_keeps_registration_order(
        self, simple_registry: TrophicRegistry
    ) -> None:
        simple_registry.register_type("deer", TrophicLevel.PRIMARY, ["plant"])
        assert simple_registry.types_at_level(TrophicLevel.PRIMARY) == ["herbivore", "deer"]

    def test_unregister(self, simple_registry: TrophicRegistry) -> None:
        assert simple_registry.unregister_type("wolf") is True
        assert simple_registry.unregister_type("wolf") is False
        assert simple_registry.predator_types_for("herbivore") == set()

    def test_copies_are_independent(self, simple_registry: TrophicRegistry) -> None:
        clone = simple_registry.copy()
        clone.register_type("bear", TrophicLevel.SECONDARY, ["herbivore"])
        assert "bear" not in simple_registry
        assert "bear" in clone

    @pytest.mark.parametrize("level", [9, -1, TrophicLevel.UNKNOWN])
    def test_unknown_level_is_rejected(
        self, simple_registry: TrophicRegistry, caplog: pytest.LogCaptureFixture, level
    ) -> None:
        with caplog.at_level(logging.WARNING):
            assert simple_registry.register_type("x", level) is False
        assert not simple_registry.is_registered("x")
        assert "unknown trophic level" in caplog.text

    def test_rejected_level_keeps_existing_entry(self, simple_registry: TrophicRegistry) -> None:
        assert simple_registry.register_type("wolf", 9, ["plant"]) is False
        assert simple_registry.trophic_level_of("wolf") is TrophicLevel.SECONDARY
        assert simple_registry.prey_types_for("wolf") == {"herbivore"}
