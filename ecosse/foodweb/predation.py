"""Predation success and trophic energy transfer.

Success probability starts at 0.5 and is nudged by four attribute ratios
(speed, size, health, expressed intelligence), each applied only when both
organisms expose the attribute. Once a registered predator-prey pair is
involved the result is clamped to [0.1, 0.9]: never certain, never
impossible.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Any, Optional, Union

from ecosse.config.foodweb import (
    BASE_PREDATION_SUCCESS,
    DEFAULT_INTELLIGENCE,
    ENERGY_TRANSFER_EFFICIENCY,
    MAX_PREDATION_SUCCESS,
    MIN_PREDATION_SUCCESS,
)
from ecosse.config.simulation_config import FoodWebConfig
from ecosse.foodweb.trophic import TrophicLevel, TrophicRegistry, coerce_level
from ecosse.protocols import Organism
from ecosse.util.rng import require_rng_param

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrganismRef:
    """Identity of an organism as echoed in a predation outcome."""

    element_id: Any
    element_type: str

    @classmethod
    def of(cls, organism: Organism) -> "OrganismRef":
        return cls(element_id=organism.element_id, element_type=organism.element_type)


@dataclass(frozen=True)
class PredationOutcome:
    """Result of one predation attempt.

    Neither organism is modified; the caller applies energy changes and
    emits the resulting removal events.
    """

    success: bool
    energy_gained: float
    predator: OrganismRef
    prey: OrganismRef


def calculate_energy_transfer(
    energy: float,
    source_level: Union[TrophicLevel, int],
    target_level: Union[TrophicLevel, int],
    efficiency: float = ENERGY_TRANSFER_EFFICIENCY,
) -> float:
    """Energy that reaches *target_level* when *source_level* is consumed.

    Energy flows only to a strictly higher level, or to decomposers from any
    level. Each level crossed keeps ``efficiency`` of the energy; decomposers
    always count as one step. Unknown levels receive nothing.
    """
    source = coerce_level(source_level)
    target = coerce_level(target_level)
    if source is TrophicLevel.UNKNOWN or target is TrophicLevel.UNKNOWN:
        return 0.0
    if not math.isfinite(energy) or energy <= 0.0:
        return 0.0

    if target is TrophicLevel.DECOMPOSER:
        level_gap = 1
    elif target <= source:
        return 0.0
    else:
        level_gap = int(target) - int(source)

    return energy * efficiency ** level_gap


def _positive_attribute(organism: Organism, name: str) -> Optional[float]:
    value = organism.try_get_attribute(name)
    if value is None or not math.isfinite(value) or value <= 0.0:
        return None
    return value


def _expressed_intelligence(organism: Organism) -> float:
    value = organism.genome.expressed_value("intelligence")
    if value is None or not math.isfinite(value) or value <= 0.0:
        return DEFAULT_INTELLIGENCE
    return float(value)


class PredationEvaluator:
    """Resolves predation attempts against a trophic registry."""

    def __init__(self, registry: TrophicRegistry, config: Optional[FoodWebConfig] = None) -> None:
        self.registry = registry
        self.config = config or FoodWebConfig()

    def calculate_predation_success(self, predator: Organism, prey: Organism) -> float:
        """Probability in [0.1, 0.9] that *predator* catches *prey*.

        Returns exactly 0.0 when the pair is not a registered relationship.
        """
        if not self.registry.is_predator_prey_pair(predator.element_type, prey.element_type):
            return 0.0

        factors = self.config.predation
        chance = BASE_PREDATION_SUCCESS

        for name, weight in (
            ("speed", factors.speed),
            ("size", factors.size),
            ("health", factors.health),
        ):
            predator_value = _positive_attribute(predator, name)
            prey_value = _positive_attribute(prey, name)
            if predator_value is not None and prey_value is not None:
                chance += weight * (predator_value / prey_value - 1.0)

        if predator.genome is not None and prey.genome is not None:
            ratio = _expressed_intelligence(predator) / _expressed_intelligence(prey)
            chance += factors.intelligence * (ratio - 1.0)

        if math.isnan(chance):
            chance = BASE_PREDATION_SUCCESS
        return max(MIN_PREDATION_SUCCESS, min(MAX_PREDATION_SUCCESS, chance))

    def prey_energy(self, prey: Organism) -> float:
        energy = prey.try_get_attribute("energy")
        if energy is None:
            return self.config.default_prey_energy
        return max(0.0, energy)

    def process_predator_prey_interaction(
        self,
        predator: Organism,
        prey: Organism,
        rng: Optional[random.Random] = None,
    ) -> PredationOutcome:
        """Resolve one predation attempt with a single uniform draw."""
        rng = require_rng_param(rng, "PredationEvaluator.process_predator_prey_interaction")
        chance = self.calculate_predation_success(predator, prey)
        success = rng.random() < chance

        energy_gained = 0.0
        if success:
            energy_gained = calculate_energy_transfer(
                self.prey_energy(prey),
                self.registry.trophic_level_of(prey.element_type),
                self.registry.trophic_level_of(predator.element_type),
                self.config.energy_transfer_efficiency,
            )
        logger.debug(
            "Predation %s -> %s: chance=%.3f success=%s energy=%.3f",
            predator.element_type,
            prey.element_type,
            chance,
            success,
            energy_gained,
        )
        return PredationOutcome(
            success=success,
            energy_gained=energy_gained,
            predator=OrganismRef.of(predator),
            prey=OrganismRef.of(prey),
        )
