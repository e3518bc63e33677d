"""Allele-pair genetics for ecosystem elements.

This package provides:

- Trait / TraitSpec / TRAIT_SCHEMA: the fixed allele-pair trait model
- Genome: combination with crossover, mutation, expression, compatibility
- MutationKind and the mutation/crossover event records
- Species presets and ``create_random_genome`` for founding populations
"""

from ecosse.genetics.genome import Genome
from ecosse.genetics.mutation import (
    Allele,
    CrossoverEvent,
    MutationEvent,
    MutationKind,
    choose_mutation_kind,
)
from ecosse.genetics.presets import PRESET_PROFILES, SpeciesPreset, create_random_genome
from ecosse.genetics.trait import (
    TRAIT_SCHEMA,
    Trait,
    TraitSpec,
    is_special_trait,
)
from ecosse.genetics.validation import validate_genome

__all__ = [
    "Allele",
    "CrossoverEvent",
    "Genome",
    "MutationEvent",
    "MutationKind",
    "PRESET_PROFILES",
    "SpeciesPreset",
    "TRAIT_SCHEMA",
    "Trait",
    "TraitSpec",
    "choose_mutation_kind",
    "create_random_genome",
    "is_special_trait",
    "validate_genome",
]
