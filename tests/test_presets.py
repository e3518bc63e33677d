"""Tests for founding-genome species presets."""

import random

import pytest

from ecosse.genetics import PRESET_PROFILES, Genome, SpeciesPreset, create_random_genome
from ecosse.genetics.presets import AlleleRange, SpecialTraitRange
from ecosse.genetics.trait import TRAIT_SCHEMA
from ecosse.util.rng import MissingRNGError


@pytest.mark.parametrize("preset", list(SpeciesPreset))
def test_sampled_alleles_fall_in_declared_ranges(preset: SpeciesPreset) -> None:
    rng = random.Random(5)
    profile = PRESET_PROFILES[preset]
    declared = {entry.name for entry in profile.traits}
    assert declared == {spec.name for spec in TRAIT_SCHEMA if not spec.categorical}
    for _ in range(25):
        genome = create_random_genome(preset, rng)
        for entry in profile.traits:
            trait = genome.traits[entry.name]
            if isinstance(entry, AlleleRange):
                # Ordering may swap the two draws
                low = min(entry.dominant_low, entry.recessive_low)
                high = max(
                    entry.dominant_low + entry.dominant_span,
                    entry.recessive_low + entry.recessive_span,
                )
                assert low <= trait.recessive <= trait.dominant <= high
            else:
                assert trait.recessive == 0.0
                assert trait.dominant == 0.0 or (
                    entry.low <= trait.dominant <= entry.low + entry.span
                )
        assert (
            profile.mutation_rate_low
            <= genome.base_mutation_rate
            <= profile.mutation_rate_low + profile.mutation_rate_span
        )
        assert (
            profile.mutation_intensity_low
            <= genome.mutation_intensity
            <= profile.mutation_intensity_low + profile.mutation_intensity_span
        )


def test_producers_are_slow() -> None:
    rng = random.Random(11)
    plants = [create_random_genome(SpeciesPreset.PRODUCER, rng) for _ in range(20)]
    predators = [create_random_genome(SpeciesPreset.SECONDARY_CONSUMER, rng) for _ in range(20)]
    assert max(g.traits["speed"].dominant for g in plants) < min(
        g.traits["speed"].dominant for g in predators
    )


def test_preset_accepts_element_type_name() -> None:
    a = create_random_genome("predator", random.Random(3))
    b = create_random_genome(SpeciesPreset.SECONDARY_CONSUMER, random.Random(3))
    assert a == b


def test_unknown_preset_yields_default_genome(caplog: pytest.LogCaptureFixture) -> None:
    rng = random.Random(1)
    genome = create_random_genome("fungus", rng)
    assert genome == Genome()
    assert genome.rng is rng
    assert "Unknown species preset" in caplog.text


def test_rng_is_required() -> None:
    with pytest.raises(MissingRNGError):
        create_random_genome(SpeciesPreset.PRODUCER)


def test_special_trait_activation_odds() -> None:
    rng = random.Random(8)
    entry = SpecialTraitRange("night_vision", 0.25, 0.7, 0.3)
    active = sum(1 for _ in range(4000) if entry.sample(rng).dominant > 0)
    assert active / 4000 == pytest.approx(0.25, abs=0.03)


def test_same_seed_same_founder() -> None:
    a = create_random_genome(SpeciesPreset.PRIMARY_CONSUMER, random.Random(21))
    b = create_random_genome(SpeciesPreset.PRIMARY_CONSUMER, random.Random(21))
    assert a == b


@pytest.mark.parametrize("preset", list(SpeciesPreset))
def test_founders_differ_in_every_ranged_trait(preset: SpeciesPreset) -> None:
    rng = random.Random(1)
    first = create_random_genome(preset, rng)
    second = create_random_genome(preset, rng)
    for entry in PRESET_PROFILES[preset].traits:
        if isinstance(entry, AlleleRange):
            assert first.traits[entry.name] != second.traits[entry.name], entry.name
