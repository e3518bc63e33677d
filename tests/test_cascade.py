"""Tests for cascade propagation after removals."""

import pytest

from ecosse.config import CascadeConfig
from ecosse.events import CascadeEffectEvent, RecordingSink
from ecosse.foodweb import CascadePropagator, TrophicLevel, TrophicRegistry
from ecosse.foodweb.cascade import FOOD_SOURCE_CHANGE, PREDATION_PRESSURE_CHANGE


def _summary(effects):
    return [(e.affected_type, round(e.signed_magnitude, 6), e.depth) for e in effects]


class TestCascadePropagator:
    def test_herbivore_removal_produces_three_effects(
        self, simple_registry: TrophicRegistry, sink: RecordingSink
    ) -> None:
        effects = CascadePropagator(simple_registry, sink=sink).propagate("herbivore", "starvation")
        assert _summary(effects) == [
            ("wolf", -1.0, 0),
            ("herbivore", 0.7, 1),
            ("plant", 1.0, 0),
        ]
        assert effects[0].reason == FOOD_SOURCE_CHANGE
        assert effects[2].reason == PREDATION_PRESSURE_CHANGE
        assert [e.cause for e in effects] == ["starvation", "cascade_from_herbivore", "starvation"]

    def test_effects_are_published(
        self, simple_registry: TrophicRegistry, sink: RecordingSink
    ) -> None:
        effects = CascadePropagator(simple_registry, sink=sink).propagate("herbivore", "starvation")
        events = sink.of_type(CascadeEffectEvent)
        assert events == [effect.to_event() for effect in effects]
        assert all(event.interaction_kind == "cascade_effect" for event in events)
        assert events[0].source_type == "herbivore"
        assert events[0].target_type == "wolf"

    def test_producer_removal_hits_grazers(self, simple_registry: TrophicRegistry) -> None:
        effects = CascadePropagator(simple_registry).propagate("plant", "eaten")
        assert effects[0].affected_type == "herbivore"
        assert effects[0].signed_magnitude == pytest.approx(-1.0)
        assert effects[0].reason == FOOD_SOURCE_CHANGE

    def test_cause_names_the_previous_source(self) -> None:
        registry = TrophicRegistry()
        registry.register_type("grass", TrophicLevel.PRODUCER)
        registry.register_type("rabbit", TrophicLevel.PRIMARY, ["grass"])
        registry.register_type("fox", TrophicLevel.SECONDARY, ["rabbit"])
        registry.register_type("eagle", TrophicLevel.TERTIARY, ["fox"])
        effects = CascadePropagator(registry).propagate("grass", "blight")
        assert _summary(effects) == [
            ("rabbit", -1.0, 0),
            ("fox", -0.7, 1),
            ("eagle", -0.245, 2),
            ("grass", 0.7, 1),
        ]
        assert [(e.source_type, e.cause) for e in effects] == [
            ("grass", "blight"),
            ("rabbit", "cascade_from_grass"),
            ("fox", "cascade_from_rabbit"),
            ("rabbit", "cascade_from_grass"),
        ]

    def test_tertiary_feels_half_of_predator_loss(self, simple_registry: TrophicRegistry) -> None:
        simple_registry.register_type("eagle", TrophicLevel.TERTIARY, ["wolf"])
        effects = CascadePropagator(simple_registry).propagate("wolf", "old_age")
        by_type = {e.affected_type: e for e in effects if e.depth == 0}
        assert by_type["herbivore"].signed_magnitude == pytest.approx(1.0)
        assert by_type["eagle"].signed_magnitude == pytest.approx(-0.5)

    @pytest.mark.parametrize("element_type", ["fungus", "eagle", "dragon"])
    def test_types_without_downstream_rules_cascade_nothing(
        self, simple_registry: TrophicRegistry, element_type: str
    ) -> None:
        simple_registry.register_type("fungus", TrophicLevel.DECOMPOSER)
        simple_registry.register_type("eagle", TrophicLevel.TERTIARY, ["wolf"])
        assert CascadePropagator(simple_registry).propagate(element_type) == []

    def test_disabled(self, simple_registry: TrophicRegistry) -> None:
        propagator = CascadePropagator(simple_registry, CascadeConfig(enabled=False))
        assert propagator.propagate("herbivore") == []

    def test_zero_depth_emits_nothing(self, simple_registry: TrophicRegistry) -> None:
        propagator = CascadePropagator(simple_registry, CascadeConfig(max_depth=0))
        assert propagator.propagate("herbivore") == []

    def test_depth_one_emits_direct_effects_only(self, simple_registry: TrophicRegistry) -> None:
        propagator = CascadePropagator(simple_registry, CascadeConfig(max_depth=1))
        effects = propagator.propagate("herbivore")
        assert {e.affected_type for e in effects} == {"wolf", "plant"}
        assert all(e.depth == 0 for e in effects)

    def test_strength_decays_geometrically(self) -> None:
        registry = TrophicRegistry()
        registry.register_type("grass", TrophicLevel.PRODUCER)
        registry.register_type("rabbit", TrophicLevel.PRIMARY, ["grass"])
        registry.register_type("fox", TrophicLevel.SECONDARY, ["rabbit"])
        registry.register_type("moss", TrophicLevel.PRODUCER)
        propagator = CascadePropagator(registry, CascadeConfig(strength_decay=0.5))
        effects = propagator.propagate("fox")
        assert _summary(effects) == [
            ("rabbit", 1.0, 0),
            ("fox", -0.5, 1),
            ("grass", 0.5, 1),
            ("moss", 0.5, 1),
        ]

    def test_cyclic_registry_terminates(self) -> None:
        registry = TrophicRegistry()
        for index in range(5):
            registry.register_type(f"p{index}", TrophicLevel.PRODUCER)
            registry.register_type(f"h{index}", TrophicLevel.PRIMARY, [f"p{index}", f"w{index}"])
            registry.register_type(f"w{index}", TrophicLevel.SECONDARY, [f"h{index}", f"w{index}"])
        propagator = CascadePropagator(registry, CascadeConfig(max_depth=100))
        effects = propagator.propagate("h0", "test")
        assert 0 < len(effects) <= len(registry)
        assert len({e.affected_type for e in effects}) == len(effects)
