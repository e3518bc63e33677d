"""Allele-pair trait definitions.

This module provides:
- Trait: a (dominant, recessive) allele pair
- TraitSpec: declarative schema entry giving a trait's name and default alleles
- TRAIT_SCHEMA: the fixed, ordered trait schema every genome carries
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from ecosse.config.genetics import SPECIAL_TRAITS
from ecosse.exceptions import AlleleMismatchError

# Numeric alleles are floats; categorical alleles are an optional label.
AlleleValue = Union[float, str, None]


def is_numeric_allele(value: Any) -> bool:
    """Return True for int/float allele values (bool is not numeric here)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_special_trait(name: str) -> bool:
    """Return True if *name* is on the special-trait whitelist."""
    return name in SPECIAL_TRAITS


@dataclass
class Trait:
    """A pair of alleles for one named trait.

    Both alleles are either numeric or categorical labels (or None). When
    numeric, the dominant allele is kept >= the recessive one by
    ``ensure_order``.

    Attributes:
        dominant: The dominant allele
        recessive: The recessive allele
    """

    dominant: AlleleValue
    recessive: AlleleValue

    def __post_init__(self) -> None:
        if is_numeric_allele(self.dominant):
            self.dominant = float(self.dominant)
        if is_numeric_allele(self.recessive):
            self.recessive = float(self.recessive)
        self.check_kinds()

    @property
    def is_numeric(self) -> bool:
        return is_numeric_allele(self.dominant) and is_numeric_allele(self.recessive)

    @property
    def is_categorical(self) -> bool:
        return not is_numeric_allele(self.dominant) and not is_numeric_allele(self.recessive)

    def check_kinds(self) -> None:
        """Raise AlleleMismatchError if the two alleles cannot be compared."""
        if not self.is_numeric and not self.is_categorical:
            raise AlleleMismatchError(
                f"allele kinds differ: dominant={self.dominant!r}, recessive={self.recessive!r}"
            )

    def ensure_order(self) -> bool:
        """Swap numeric alleles if recessive > dominant. Returns True if swapped."""
        self.check_kinds()
        if self.is_numeric and self.dominant < self.recessive:
            self.dominant, self.recessive = self.recessive, self.dominant
            return True
        return False

    def copy(self) -> "Trait":
        return Trait(self.dominant, self.recessive)

    def as_tuple(self) -> Tuple[AlleleValue, AlleleValue]:
        return (self.dominant, self.recessive)


@dataclass(frozen=True)
class TraitSpec:
    """Declarative schema entry for a genetic trait.

    Attributes:
        name: Trait name used as the genome mapping key
        dominant: Default dominant allele (the neutral midpoint)
        recessive: Default recessive allele
    """

    name: str
    dominant: AlleleValue
    recessive: AlleleValue

    @property
    def special(self) -> bool:
        return is_special_trait(self.name)

    @property
    def categorical(self) -> bool:
        return not is_numeric_allele(self.dominant)

    def default_trait(self) -> Trait:
        return Trait(self.dominant, self.recessive)


# Fixed schema; iteration order is part of the determinism contract.
TRAIT_SCHEMA: List[TraitSpec] = [
    # Physical
    TraitSpec("size", 1.0, 0.8),
    TraitSpec("color", 1.0, 0.8),
    TraitSpec("body_shape", 1.0, 0.8),
    TraitSpec("skin_texture", 1.0, 0.8),
    # Behavioral
    TraitSpec("speed", 1.0, 0.8),
    TraitSpec("aggressiveness", 0.5, 0.3),
    TraitSpec("intelligence", 0.5, 0.3),
    TraitSpec("social_behavior", 0.5, 0.3),
    # Survival
    TraitSpec("metabolism_rate", 1.0, 0.8),
    TraitSpec("reproduction_chance", 1.0, 0.8),
    TraitSpec("lifespan", 1.0, 0.8),
    TraitSpec("immune_system", 1.0, 0.8),
    # Adaptation
    TraitSpec("temperature_tolerance", 1.0, 0.8),
    TraitSpec("water_dependency", 1.0, 0.8),
    TraitSpec("radiation_resistance", 0.5, 0.3),
    TraitSpec("toxin_resistance", 0.5, 0.3),
    # Special
    TraitSpec("special_ability", None, None),
    TraitSpec("camouflage", 0.0, 0.0),
    TraitSpec("night_vision", 0.0, 0.0),
    TraitSpec("regeneration", 0.0, 0.0),
]


def default_traits() -> Dict[str, Trait]:
    """Return a fresh schema-ordered mapping of default traits."""
    return {spec.name: spec.default_trait() for spec in TRAIT_SCHEMA}


def build_traits(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Trait]:
    """Build a schema-ordered trait mapping, applying *overrides* on top.

    Overrides may be Trait instances, ``(dominant, recessive)`` tuples, or
    ``{"dominant": .., "recessive": ..}`` dicts. Names outside the schema are
    appended after the schema traits in the order given.
    """
    traits = default_traits()
    for name, raw in (overrides or {}).items():
        traits[name] = coerce_trait(raw)
    return traits


def coerce_trait(raw: Any) -> Trait:
    """Convert a loose trait description into a Trait copy."""
    if isinstance(raw, Trait):
        return raw.copy()
    if isinstance(raw, dict):
        return Trait(raw.get("dominant"), raw.get("recessive"))
    dominant, recessive = raw
    return Trait(dominant, recessive)
