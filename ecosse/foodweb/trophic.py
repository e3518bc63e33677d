"""Trophic levels and the predator-prey registry."""

import logging
from enum import IntEnum
from typing import Dict, FrozenSet, Iterable, List, Set, Union

from ecosse.config.foodweb import DEFAULT_PREY_MAP, DEFAULT_TROPHIC_LEVELS

logger = logging.getLogger(__name__)


class TrophicLevel(IntEnum):
    """Feeding-chain rank of an element type.

    PRODUCER < PRIMARY < SECONDARY < TERTIARY are ordered; DECOMPOSER is a
    sink every level feeds. UNKNOWN is the sentinel for unregistered types.
    """

    UNKNOWN = -1
    PRODUCER = 0
    PRIMARY = 1
    SECONDARY = 2
    TERTIARY = 3
    DECOMPOSER = 4

    @property
    def is_ordered(self) -> bool:
        return TrophicLevel.PRODUCER <= self <= TrophicLevel.TERTIARY

    @property
    def can_have_prey(self) -> bool:
        return self in (TrophicLevel.PRIMARY, TrophicLevel.SECONDARY, TrophicLevel.TERTIARY)


def coerce_level(level: Union[TrophicLevel, int]) -> TrophicLevel:
    """Convert an int to a TrophicLevel, mapping unrecognised values to UNKNOWN."""
    try:
        return TrophicLevel(level)
    except ValueError:
        return TrophicLevel.UNKNOWN


class TrophicRegistry:
    """Mutable mapping of element type to trophic level and permitted prey.

    Registrations are rare and lookups frequent; the reverse (prey ->
    predators) lookup scans all predator entries.
    """

    def __init__(self) -> None:
        self._levels: Dict[str, TrophicLevel] = {}
        self._prey: Dict[str, FrozenSet[str]] = {}

    @classmethod
    def with_defaults(cls) -> "TrophicRegistry":
        """Build a registry holding the built-in seed food web."""
        registry = cls()
        for element_type, level in DEFAULT_TROPHIC_LEVELS.items():
            registry.register_type(element_type, level, DEFAULT_PREY_MAP.get(element_type, ()))
        return registry

    def register_type(
        self,
        element_type: str,
        level: Union[TrophicLevel, int],
        prey_types: Iterable[str] = (),
    ) -> bool:
        """Register (or overwrite) an element type.

        Producers and decomposers cannot declare prey; any given are dropped
        with a warning. A level outside the known ladder is rejected with a
        warning and leaves the registry untouched.

        Returns:
            True if the type was stored
        """
        resolved = coerce_level(level)
        if resolved is TrophicLevel.UNKNOWN:
            logger.warning("Rejecting %s: unknown trophic level %r", element_type, level)
            return False
        prey = frozenset(prey_types)
        if prey and not resolved.can_have_prey:
            logger.warning(
                "Ignoring prey %s declared for %s at level %s",
                sorted(prey),
                element_type,
                resolved.name,
            )
            prey = frozenset()

        self._levels[element_type] = resolved
        if prey:
            self._prey[element_type] = prey
        else:
            self._prey.pop(element_type, None)
        logger.info(
            "Registered element type in food web: %s (trophic level: %s)",
            element_type,
            resolved.name,
        )
        return True

    def unregister_type(self, element_type: str) -> bool:
        """Remove a type entirely. Returns True if it was registered."""
        self._prey.pop(element_type, None)
        return self._levels.pop(element_type, None) is not None

    def is_registered(self, element_type: str) -> bool:
        return element_type in self._levels

    def trophic_level_of(self, element_type: str) -> TrophicLevel:
        return self._levels.get(element_type, TrophicLevel.UNKNOWN)

    def is_predator_prey_pair(self, predator_type: str, prey_type: str) -> bool:
        return prey_type in self._prey.get(predator_type, ())

    def prey_types_for(self, predator_type: str) -> Set[str]:
        return set(self._prey.get(predator_type, ()))

    def predator_types_for(self, prey_type: str) -> Set[str]:
        return {predator for predator, prey in self._prey.items() if prey_type in prey}

    def types_at_level(self, level: TrophicLevel) -> List[str]:
        """Registered types at *level*, in registration order."""
        return [name for name, lvl in self._levels.items() if lvl == level]

    def registered_types(self) -> List[str]:
        return list(self._levels)

    def copy(self) -> "TrophicRegistry":
        clone = TrophicRegistry()
        clone._levels = dict(self._levels)
        clone._prey = dict(self._prey)
        return clone

    def __contains__(self, element_type: object) -> bool:
        return element_type in self._levels

    def __len__(self) -> int:
        return len(self._levels)
