"""Runtime configuration for the food-web system."""

import math
from dataclasses import dataclass, field

from ecosse.config.foodweb import (
    CASCADE_ENABLED,
    CASCADE_MAX_DEPTH,
    CASCADE_STRENGTH_DECAY,
    DEFAULT_PREY_ENERGY,
    ENERGY_TRANSFER_EFFICIENCY,
    HEALTH_FACTOR,
    INTELLIGENCE_FACTOR,
    SIZE_FACTOR,
    SPEED_FACTOR,
)
from ecosse.exceptions import ConfigurationError


@dataclass(frozen=True)
class PredationFactors:
    """Weights applied to each predator/prey attribute ratio."""

    speed: float = SPEED_FACTOR
    size: float = SIZE_FACTOR
    health: float = HEALTH_FACTOR
    intelligence: float = INTELLIGENCE_FACTOR

    def __post_init__(self) -> None:
        for name in ("speed", "size", "health", "intelligence"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0.0:
                raise ConfigurationError(f"predation factor {name}={value!r} must be >= 0")


@dataclass(frozen=True)
class CascadeConfig:
    """Cascade propagation settings.

    Attributes:
        enabled: Whether removals trigger cascade effects at all
        max_depth: Hard recursion limit (depth 0 .. max_depth - 1 emit effects)
        strength_decay: Effect strength multiplier per level (strength = decay ** depth)
    """

    enabled: bool = CASCADE_ENABLED
    max_depth: int = CASCADE_MAX_DEPTH
    strength_decay: float = CASCADE_STRENGTH_DECAY

    def __post_init__(self) -> None:
        if not isinstance(self.max_depth, int) or self.max_depth < 0:
            raise ConfigurationError(f"cascade max_depth={self.max_depth!r} must be a non-negative int")
        if not (0.0 <= self.strength_decay <= 1.0):
            raise ConfigurationError(
                f"cascade strength_decay={self.strength_decay!r} not in [0, 1]"
            )


@dataclass(frozen=True)
class FoodWebConfig:
    """Configuration for energy transfer, predation, and cascades."""

    energy_transfer_efficiency: float = ENERGY_TRANSFER_EFFICIENCY
    default_prey_energy: float = DEFAULT_PREY_ENERGY
    predation: PredationFactors = field(default_factory=PredationFactors)
    cascade: CascadeConfig = field(default_factory=CascadeConfig)

    def __post_init__(self) -> None:
        if not (0.0 < self.energy_transfer_efficiency < 1.0):
            raise ConfigurationError(
                f"energy_transfer_efficiency={self.energy_transfer_efficiency!r} not in (0, 1)"
            )
        if not math.isfinite(self.default_prey_energy) or self.default_prey_energy < 0.0:
            raise ConfigurationError(
                f"default_prey_energy={self.default_prey_energy!r} must be >= 0"
            )
