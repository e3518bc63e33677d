"""Cascade propagation of population changes through the food web.

Removing an element ripples outward by trophic level:

- producer lost: primary consumers lose food
- primary consumer lost: secondary consumers lose food, producers gain
  (less grazing)
- secondary consumer lost: primary consumers gain (less predation),
  tertiary consumers lose a little food (half strength)

Effects at depth d have strength ``decay ** d``. The walk carries a
remaining-depth counter that only ever decreases, so it terminates on any
registry graph, cycles included. Within one walk each type receives at most
one effect.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ecosse.config.foodweb import TERTIARY_CASCADE_SCALE
from ecosse.config.simulation_config import CascadeConfig
from ecosse.events.domain_events import CascadeEffectEvent
from ecosse.events.event_bus import NotificationSink
from ecosse.foodweb.trophic import TrophicLevel, TrophicRegistry

logger = logging.getLogger(__name__)

CASCADE_INTERACTION = "cascade_effect"
FOOD_SOURCE_CHANGE = "food_source_change"
PREDATION_PRESSURE_CHANGE = "predation_pressure_change"


@dataclass(frozen=True)
class CascadeEffect:
    """One second-order consequence of a population change.

    Attributes:
        affected_type: Type receiving the effect
        signed_magnitude: Effect strength; negative is harmful
        reason: FOOD_SOURCE_CHANGE or PREDATION_PRESSURE_CHANGE
        source_type: Type whose change produced this effect
        depth: Recursion depth (0 for direct effects)
        cause: Root cause, or "cascade_from_<type>" below depth 0
    """

    affected_type: str
    signed_magnitude: float
    reason: str
    source_type: str
    depth: int
    cause: str

    def to_event(self) -> CascadeEffectEvent:
        return CascadeEffectEvent(
            source_type=self.source_type,
            target_type=self.affected_type,
            interaction_kind=CASCADE_INTERACTION,
            effect=self.signed_magnitude,
            reason=self.reason,
            cause=self.cause,
            depth=self.depth,
        )


class CascadePropagator:
    """Walks trophic linkages after a removal and emits decaying effects."""

    def __init__(
        self,
        registry: TrophicRegistry,
        config: Optional[CascadeConfig] = None,
        sink: Optional[NotificationSink] = None,
    ) -> None:
        self.registry = registry
        self.config = config or CascadeConfig()
        self.sink = sink

    def propagate(self, element_type: str, cause: str = "unknown") -> List[CascadeEffect]:
        """Compute and emit every cascade effect of removing one *element_type*."""
        if not self.config.enabled:
            return []
        effects: List[CascadeEffect] = []
        self._walk(element_type, cause, 0, self.config.max_depth, set(), effects)
        if effects:
            logger.debug(
                "Removal of %s (%s) cascaded to %d effect(s)", element_type, cause, len(effects)
            )
        return effects

    def _linked_targets(self, element_type: str, strength: float) -> List[Tuple[str, float, str]]:
        level = self.registry.trophic_level_of(element_type)
        targets: List[Tuple[str, float, str]] = []

        if level is TrophicLevel.PRODUCER:
            for target in self.registry.types_at_level(TrophicLevel.PRIMARY):
                targets.append((target, -strength, FOOD_SOURCE_CHANGE))
        elif level is TrophicLevel.PRIMARY:
            for target in self.registry.types_at_level(TrophicLevel.SECONDARY):
                targets.append((target, -strength, FOOD_SOURCE_CHANGE))
            for target in self.registry.types_at_level(TrophicLevel.PRODUCER):
                targets.append((target, strength, PREDATION_PRESSURE_CHANGE))
        elif level is TrophicLevel.SECONDARY:
            for target in self.registry.types_at_level(TrophicLevel.PRIMARY):
                targets.append((target, strength, PREDATION_PRESSURE_CHANGE))
            for target in self.registry.types_at_level(TrophicLevel.TERTIARY):
                targets.append((target, -strength * TERTIARY_CASCADE_SCALE, FOOD_SOURCE_CHANGE))
        return targets

    def _walk(
        self,
        element_type: str,
        cause: str,
        depth: int,
        remaining: int,
        affected: Set[str],
        effects: List[CascadeEffect],
    ) -> None:
        if remaining <= 0:
            return
        strength = self.config.strength_decay ** depth
        targets = [
            target
            for target in self._linked_targets(element_type, strength)
            if target[0] not in affected
        ]
        affected.update(target_type for target_type, _, _ in targets)

        for target_type, magnitude, reason in targets:
            effect = CascadeEffect(
                affected_type=target_type,
                signed_magnitude=magnitude,
                reason=reason,
                source_type=element_type,
                depth=depth,
                cause=cause,
            )
            effects.append(effect)
            if self.sink is not None:
                self.sink.emit(effect.to_event())
            self._walk(
                target_type,
                f"cascade_from_{element_type}",
                depth + 1,
                remaining - 1,
                affected,
                effects,
            )
