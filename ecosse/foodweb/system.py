"""Food-web system: wires registry, ledger, predation, and cascades together.

``FoodWebSystem`` is the surface the surrounding simulation talks to. It owns
one trophic registry and one population ledger per instance (no globals), so
several simulations can run side by side. Attach it to an EventBus to have
element created/removed notifications update the ledger and trigger cascades.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Union

from ecosse.config.simulation_config import FoodWebConfig
from ecosse.events.domain_events import ElementCreatedEvent, ElementRemovedEvent
from ecosse.events.event_bus import EventBus, NotificationSink
from ecosse.exceptions import ConfigurationError
from ecosse.foodweb.cascade import CascadeEffect, CascadePropagator
from ecosse.foodweb.population import PopulationLedger
from ecosse.foodweb.predation import (
    PredationEvaluator,
    PredationOutcome,
    calculate_energy_transfer,
)
from ecosse.foodweb.trophic import TrophicLevel, TrophicRegistry
from ecosse.protocols import Organism
from ecosse.util.rng import resolve_rng

logger = logging.getLogger(__name__)


def _within_distance(a: Organism, b: Organism, max_distance: float) -> bool:
    if math.isinf(max_distance):
        return True
    ax, ay = a.try_get_attribute("x"), a.try_get_attribute("y")
    bx, by = b.try_get_attribute("x"), b.try_get_attribute("y")
    if None in (ax, ay, bx, by):
        # Without positions on both sides, distance cannot exclude a candidate
        return True
    return math.hypot(ax - bx, ay - by) <= max_distance


class FoodWebSystem:
    """Per-simulation food web.

    Attributes:
        registry: Trophic levels and predator-prey graph
        ledger: Live population counts by type
        config: Active FoodWebConfig
        sink: Where cascade notifications are published
        rng: Default generator for predation draws
    """

    def __init__(
        self,
        registry: Optional[TrophicRegistry] = None,
        ledger: Optional[PopulationLedger] = None,
        config: Optional[FoodWebConfig] = None,
        sink: Optional[NotificationSink] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.registry = registry if registry is not None else TrophicRegistry.with_defaults()
        self.ledger = (
            ledger if ledger is not None else PopulationLedger(self.registry.registered_types())
        )
        self.config = config or FoodWebConfig()
        self.sink = sink
        self.rng = rng
        self._bus: Optional[EventBus] = None
        self._build_components()

    def _build_components(self) -> None:
        self.evaluator = PredationEvaluator(self.registry, self.config)
        self.propagator = CascadePropagator(self.registry, self.config.cascade, self.sink)

    # =========================================================================
    # Event wiring
    # =========================================================================

    def attach(self, bus: EventBus, initial_elements: Iterable[Any] = ()) -> None:
        """Count *initial_elements* and subscribe to element lifecycle events.

        Cascade effects are published on *bus* unless a sink was given.
        """
        self.detach()
        self.update_population_counts(initial_elements)
        bus.subscribe(ElementCreatedEvent, self.handle_element_created)
        bus.subscribe(ElementRemovedEvent, self.handle_element_removed)
        self._bus = bus
        if self.sink is None:
            self.sink = bus
            self._build_components()
        logger.info("Food web system attached (%d element types)", len(self.registry))

    def detach(self) -> None:
        """Unsubscribe from the bus attached with ``attach``, if any."""
        if self._bus is None:
            return
        self._bus.unsubscribe(ElementCreatedEvent, self.handle_element_created)
        self._bus.unsubscribe(ElementRemovedEvent, self.handle_element_removed)
        if self.sink is self._bus:
            self.sink = None
            self._build_components()
        self._bus = None

    def handle_element_created(self, event: ElementCreatedEvent) -> None:
        self.ledger.on_element_created(event.element_type)

    def handle_element_removed(self, event: ElementRemovedEvent) -> List[CascadeEffect]:
        self.ledger.on_element_removed(event.element_type)
        if not self.registry.is_registered(event.element_type):
            return []
        return self.propagator.propagate(event.element_type, event.cause)

    # =========================================================================
    # Registry
    # =========================================================================

    def register_element_type(
        self,
        element_type: str,
        trophic_level: Union[TrophicLevel, int],
        prey_types: Iterable[str] = (),
    ) -> bool:
        """Register or overwrite *element_type* and open its population entry.

        Returns False (and opens no entry) when the level is not recognised.
        """
        if not self.registry.register_type(element_type, trophic_level, prey_types):
            return False
        self.ledger.track(element_type)
        return True

    def is_predator_prey_relationship(self, predator_type: str, prey_type: str) -> bool:
        return self.registry.is_predator_prey_pair(predator_type, prey_type)

    def get_trophic_level(self, element_type: str) -> TrophicLevel:
        return self.registry.trophic_level_of(element_type)

    # =========================================================================
    # Predation and energy
    # =========================================================================

    def calculate_predation_success(self, predator: Organism, prey: Organism) -> float:
        return self.evaluator.calculate_predation_success(predator, prey)

    def process_predator_prey_interaction(
        self,
        predator: Organism,
        prey: Organism,
        rng: Optional[random.Random] = None,
    ) -> PredationOutcome:
        rng = resolve_rng(rng, self.rng, "FoodWebSystem.process_predator_prey_interaction")
        return self.evaluator.process_predator_prey_interaction(predator, prey, rng)

    def calculate_energy_transfer(
        self,
        energy: float,
        source_level: Union[TrophicLevel, int],
        target_level: Union[TrophicLevel, int],
    ) -> float:
        return calculate_energy_transfer(
            energy, source_level, target_level, self.config.energy_transfer_efficiency
        )

    def get_potential_prey(
        self,
        predator: Organism,
        candidates: Iterable[Organism],
        max_distance: float = math.inf,
    ) -> List[Organism]:
        """Candidates *predator* may hunt, optionally within *max_distance*."""
        prey_types = self.registry.prey_types_for(predator.element_type)
        if not prey_types:
            return []
        return [
            candidate
            for candidate in candidates
            if candidate.element_type in prey_types
            and _within_distance(predator, candidate, max_distance)
        ]

    def get_potential_predators(
        self,
        prey: Organism,
        candidates: Iterable[Organism],
        max_distance: float = math.inf,
    ) -> List[Organism]:
        """Candidates that may hunt *prey*, optionally within *max_distance*."""
        predator_types = self.registry.predator_types_for(prey.element_type)
        if not predator_types:
            return []
        return [
            candidate
            for candidate in candidates
            if candidate.element_type in predator_types
            and _within_distance(prey, candidate, max_distance)
        ]

    # =========================================================================
    # Population and cascades
    # =========================================================================

    def update_population_counts(self, elements: Iterable[Any]) -> None:
        """Rebuild the ledger from the full list of live elements."""
        self.ledger.rebuild(elements)

    def get_population_counts(self) -> Dict[str, int]:
        return self.ledger.counts_snapshot()

    def propagate_cascade(self, element_type: str, cause: str = "unknown") -> List[CascadeEffect]:
        return self.propagator.propagate(element_type, cause)

    # =========================================================================
    # Configuration
    # =========================================================================

    def update_config(self, **overrides: Any) -> FoodWebConfig:
        """Replace configuration values and rebuild dependent components.

        ``predation`` and ``cascade`` accept either a replacement dataclass or a
        dict of field overrides.

        Raises:
            ConfigurationError: For unknown fields or invalid values
        """
        try:
            for key in ("predation", "cascade"):
                value = overrides.get(key)
                if isinstance(value, dict):
                    overrides[key] = replace(getattr(self.config, key), **value)
            self.config = replace(self.config, **overrides)
        except TypeError as exc:
            raise ConfigurationError(f"Invalid food web config override: {exc}") from exc
        self._build_components()
        logger.info("Food web config updated: %s", sorted(overrides))
        return self.config
