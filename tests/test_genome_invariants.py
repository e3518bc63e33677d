"""Property-style invariant checks for genomes across many seeds."""

import random
import statistics

import pytest

from ecosse.genetics import Genome, MutationEvent, SpeciesPreset, create_random_genome
from ecosse.genetics.validation import mutated_value_ok

SEEDS = [0, 1, 2, 17, 42, 123, 999]


def _lineage(seed: int, generations: int) -> Genome:
    rng = random.Random(seed)
    a = create_random_genome(SpeciesPreset.PRIMARY_CONSUMER, rng)
    b = create_random_genome(SpeciesPreset.SECONDARY_CONSUMER, rng)
    for _ in range(generations):
        a, b = b, a.combine(b, rng=rng)
    return b


@pytest.mark.parametrize("seed", SEEDS)
def test_dominant_never_below_recessive(seed: int) -> None:
    child = _lineage(seed, 10)
    for name, trait in child.traits.items():
        if trait.is_numeric:
            assert trait.dominant >= trait.recessive, name


@pytest.mark.parametrize("seed", SEEDS)
def test_mutated_alleles_respect_floor(seed: int) -> None:
    rng = random.Random(seed)
    genome = create_random_genome(SpeciesPreset.PRODUCER, rng)
    genome.base_mutation_rate = 1.0
    genome.mutation_intensity = 1.0
    for _ in range(10):
        genome.mutate(rng=rng)
    for event in genome.mutation_history:
        assert isinstance(event, MutationEvent)
        assert mutated_value_ok(event.trait, event.new_value), event


@pytest.mark.parametrize("seed", SEEDS)
def test_lineage_stays_valid(seed: int) -> None:
    child = _lineage(seed, 15)
    assert child.validate()["ok"], child.validate()["issues"]
    assert child.generation >= 2


@pytest.mark.parametrize("seed", SEEDS)
def test_replay_is_deterministic(seed: int) -> None:
    assert _lineage(seed, 5) == _lineage(seed, 5)


@pytest.mark.slow
def test_population_mean_does_not_drift() -> None:
    """Repeated combination of identical parents stays near the parents."""
    rng = random.Random(2024)
    parent = Genome(traits={"speed": (2.0, 1.5)}, fill_schema=False)
    dominants = [parent.combine(parent, rng=rng).traits["speed"].dominant for _ in range(1000)]
    assert abs(statistics.mean(dominants) - 2.0) <= 0.2
    assert statistics.pvariance(dominants) > 0
