"""Validation helpers for genetic data structures.

These functions are intended for debugging and safety checks, not hot-path logic.
They help catch subtle bugs (mixed allele kinds, ordering violations,
out-of-range settings) close to the source.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List

from ecosse.config.genetics import MIN_ALLELE_VALUE
from ecosse.genetics.trait import Trait, is_numeric_allele, is_special_trait

if TYPE_CHECKING:
    from ecosse.genetics.genome import Genome


def validate_trait(name: str, trait: object, *, path: str) -> List[str]:
    """Validate a single allele pair.

    Returns a list of human-readable issues; empty means valid.
    """
    if not isinstance(trait, Trait):
        return [f"{path}.{name}: expected Trait, got {type(trait).__name__}"]

    dominant_numeric = is_numeric_allele(trait.dominant)
    recessive_numeric = is_numeric_allele(trait.recessive)
    if dominant_numeric != recessive_numeric:
        return [f"{path}.{name}: mixed allele kinds ({trait.dominant!r}, {trait.recessive!r})"]
    if not dominant_numeric:
        return []

    issues: List[str] = []
    for label, value in (("dominant", trait.dominant), ("recessive", trait.recessive)):
        if not math.isfinite(value):
            issues.append(f"{path}.{name}.{label}: not finite ({value})")
        elif value < 0.0:
            issues.append(f"{path}.{name}.{label}: {value} < 0.0")
    if not issues and trait.dominant < trait.recessive:
        issues.append(
            f"{path}.{name}: dominant {trait.dominant} < recessive {trait.recessive}"
        )
    return issues


def mutated_value_ok(trait_name: str, value: float) -> bool:
    """Return True if *value* is a legal result of a mutation on *trait_name*."""
    if is_special_trait(trait_name) and value == 0:
        return True
    return value >= MIN_ALLELE_VALUE


def validate_genome(genome: Genome, *, path: str = "genome") -> List[str]:
    """Validate every trait and configuration scalar of *genome*."""
    issues: List[str] = []
    for name, trait in genome.traits.items():
        issues.extend(validate_trait(name, trait, path=f"{path}.traits"))

    if not (0.0 <= genome.base_mutation_rate <= 1.0):
        issues.append(f"{path}.base_mutation_rate: {genome.base_mutation_rate} not in [0, 1]")
    if not (0.0 <= genome.mutation_intensity <= 1.0):
        issues.append(f"{path}.mutation_intensity: {genome.mutation_intensity} not in [0, 1]")
    if not (genome.expression_strength >= 0.0):
        issues.append(f"{path}.expression_strength: {genome.expression_strength} < 0")
    if not isinstance(genome.generation, int) or genome.generation < 1:
        issues.append(f"{path}.generation: expected int >= 1, got {genome.generation!r}")

    for event in genome.mutation_history:
        new_value = getattr(event, "new_value", None)
        if new_value is not None and not mutated_value_ok(event.trait, new_value):
            issues.append(
                f"{path}.mutation_history: {event.trait} mutated to {new_value} (< {MIN_ALLELE_VALUE})"
            )
    return issues
