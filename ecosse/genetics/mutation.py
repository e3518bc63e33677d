"""Mutation operations for allele-pair genomes.

Mutations introduce random variation into offspring. Each allele mutates
independently; a hit picks one of four kinds by weighted draw:

- POINT: small uniform step scaled by the genome's mutation intensity
- JUMP: the same step, three times larger
- ACTIVATION: switches an inactive special trait on (else behaves like POINT)
- DEACTIVATION: switches an active special trait off (else behaves like POINT)

Crossover is not a mutation kind; it happens while seeding a child in
``Genome.combine`` and is recorded as a CrossoverEvent.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from ecosse.config.genetics import (
    ACTIVATION_MUTATION_WEIGHT,
    DEACTIVATION_MUTATION_WEIGHT,
    DOMINANT_ACTIVATION_LOW,
    DOMINANT_ACTIVATION_SPAN,
    JUMP_MUTATION_MULTIPLIER,
    JUMP_MUTATION_WEIGHT,
    MIN_ALLELE_VALUE,
    POINT_MUTATION_WEIGHT,
    RECESSIVE_ACTIVATION_LOW,
    RECESSIVE_ACTIVATION_SPAN,
)
from ecosse.genetics.trait import is_special_trait


class MutationKind(Enum):
    """Closed set of mutation kinds."""

    POINT = "point"
    JUMP = "jump"
    ACTIVATION = "activation"
    DEACTIVATION = "deactivation"


class Allele(Enum):
    """Which half of a trait's allele pair an event touched."""

    DOMINANT = "dominant"
    RECESSIVE = "recessive"


# Cumulative draw order matters for reproducibility.
MUTATION_KIND_WEIGHTS: Tuple[Tuple[MutationKind, float], ...] = (
    (MutationKind.POINT, POINT_MUTATION_WEIGHT),
    (MutationKind.JUMP, JUMP_MUTATION_WEIGHT),
    (MutationKind.ACTIVATION, ACTIVATION_MUTATION_WEIGHT),
    (MutationKind.DEACTIVATION, DEACTIVATION_MUTATION_WEIGHT),
)


@dataclass(frozen=True)
class MutationEvent:
    """A single applied allele mutation.

    Attributes:
        trait: Trait name
        allele: Which allele changed
        old_value: Value before the mutation
        new_value: Value after the mutation
        magnitude: Signed change requested by the mutation draw
        kind: Mutation kind that was applied
        generation: Generation of the genome that mutated
    """

    trait: str
    allele: Allele
    old_value: float
    new_value: float
    magnitude: float
    kind: MutationKind
    generation: int


@dataclass(frozen=True)
class CrossoverEvent:
    """Partial blending of a child's two seeded alleles during combine().

    Attributes:
        trait: Trait name
        amount: Blend fraction in [0, 0.3)
        old_dominant: Seeded dominant allele before blending
        old_recessive: Seeded recessive allele before blending
        new_dominant: Dominant allele after blending
        new_recessive: Recessive allele after blending
        generation: Generation of the child genome
    """

    trait: str
    amount: float
    old_dominant: float
    old_recessive: float
    new_dominant: float
    new_recessive: float
    generation: int


def choose_mutation_kind(rng: random.Random) -> MutationKind:
    """Pick a mutation kind by cumulative weighted draw."""
    roll = rng.random()
    cumulative = 0.0
    for kind, weight in MUTATION_KIND_WEIGHTS:
        cumulative += weight
        if roll < cumulative:
            return kind
    # Floating-point slack past the last bucket
    return MutationKind.POINT


def _point_step(value: float, intensity: float, rng: random.Random, scale: float = 1.0) -> Tuple[float, float]:
    amount = (rng.random() * 2.0 - 1.0) * intensity * scale
    return max(MIN_ALLELE_VALUE, value + amount), amount


def apply_mutation(
    trait_name: str,
    value: float,
    allele: Allele,
    kind: MutationKind,
    intensity: float,
    rng: random.Random,
) -> Tuple[float, float]:
    """Apply one mutation of *kind* to a numeric allele.

    Args:
        trait_name: Name of the trait (decides special-trait handling)
        value: Current allele value
        allele: Which allele is mutating (activation ranges differ)
        kind: Mutation kind to apply
        intensity: Genome mutation intensity
        rng: Random number generator

    Returns:
        Tuple of (new_value, magnitude)
    """
    special = is_special_trait(trait_name)

    if kind is MutationKind.POINT:
        return _point_step(value, intensity, rng)

    if kind is MutationKind.JUMP:
        return _point_step(value, intensity, rng, scale=JUMP_MUTATION_MULTIPLIER)

    if kind is MutationKind.ACTIVATION:
        if special and value == 0:
            if allele is Allele.DOMINANT:
                new_value = DOMINANT_ACTIVATION_LOW + rng.random() * DOMINANT_ACTIVATION_SPAN
            else:
                new_value = RECESSIVE_ACTIVATION_LOW + rng.random() * RECESSIVE_ACTIVATION_SPAN
            return new_value, new_value
        return _point_step(value, intensity, rng)

    if kind is MutationKind.DEACTIVATION:
        if special and value > 0:
            return 0.0, -value
        return _point_step(value, intensity, rng)

    raise ValueError(f"Unhandled mutation kind: {kind!r}")
