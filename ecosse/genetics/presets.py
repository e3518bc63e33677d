"""Species presets for founding genomes.

Each preset declares, per trait, the ranges its dominant and recessive
alleles are drawn from, plus the activation odds of its special traits and
the bands for its mutation settings. ``create_random_genome`` samples a
fresh genome from a preset; unknown presets get the schema defaults.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from ecosse.events.event_bus import NotificationSink
from ecosse.genetics.genome import Genome
from ecosse.genetics.trait import Trait
from ecosse.util.rng import require_rng_param

logger = logging.getLogger(__name__)


class SpeciesPreset(Enum):
    """Founding-genome presets, keyed by the element type they seed."""

    PRODUCER = "plant"
    PRIMARY_CONSUMER = "creature"
    SECONDARY_CONSUMER = "predator"


@dataclass(frozen=True)
class AlleleRange:
    """Uniform ranges for a numeric trait: value = low + rng.random() * span."""

    name: str
    dominant_low: float
    dominant_span: float
    recessive_low: float
    recessive_span: float

    def sample(self, rng: random.Random) -> Trait:
        dominant = self.dominant_low + rng.random() * self.dominant_span
        recessive = self.recessive_low + rng.random() * self.recessive_span
        return Trait(dominant, recessive)


@dataclass(frozen=True)
class SpecialTraitRange:
    """A special trait that starts active with probability ``chance``."""

    name: str
    chance: float
    low: float
    span: float

    def sample(self, rng: random.Random) -> Trait:
        dominant = self.low + rng.random() * self.span if rng.random() < self.chance else 0.0
        return Trait(dominant, 0.0)


@dataclass(frozen=True)
class PresetProfile:
    """Everything needed to sample a founding genome for one preset."""

    traits: Tuple[Union[AlleleRange, SpecialTraitRange], ...]
    mutation_rate_low: float
    mutation_rate_span: float
    mutation_intensity_low: float
    mutation_intensity_span: float


PRESET_PROFILES: Dict[SpeciesPreset, PresetProfile] = {
    # Producers: no locomotion, fast reproduction, thirsty
    SpeciesPreset.PRODUCER: PresetProfile(
        traits=(
            AlleleRange("size", 0.8, 0.4, 0.6, 0.4),
            AlleleRange("color", 0.7, 0.6, 0.5, 0.5),
            AlleleRange("body_shape", 0.3, 0.7, 0.2, 0.5),
            AlleleRange("skin_texture", 0.2, 0.8, 0.1, 0.6),
            AlleleRange("speed", 0.1, 0.1, 0.1, 0.05),
            AlleleRange("aggressiveness", 0.1, 0.1, 0.1, 0.05),
            AlleleRange("intelligence", 0.1, 0.1, 0.1, 0.05),
            AlleleRange("social_behavior", 0.1, 0.2, 0.1, 0.1),
            AlleleRange("metabolism_rate", 0.3, 0.3, 0.2, 0.2),
            AlleleRange("reproduction_chance", 0.004, 0.003, 0.002, 0.002),
            AlleleRange("lifespan", 0.7, 0.6, 0.5, 0.4),
            AlleleRange("immune_system", 0.6, 0.4, 0.4, 0.3),
            AlleleRange("water_dependency", 0.7, 0.6, 0.5, 0.4),
            AlleleRange("temperature_tolerance", 0.6, 0.8, 0.4, 0.6),
            AlleleRange("radiation_resistance", 0.4, 0.6, 0.2, 0.4),
            AlleleRange("toxin_resistance", 0.5, 0.5, 0.3, 0.4),
            SpecialTraitRange("camouflage", 0.1, 0.5, 0.5),
            SpecialTraitRange("night_vision", 0.02, 0.2, 0.3),
            SpecialTraitRange("regeneration", 0.05, 0.3, 0.7),
        ),
        mutation_rate_low=0.05,
        mutation_rate_span=0.03,
        mutation_intensity_low=0.15,
        mutation_intensity_span=0.15,
    ),
    SpeciesPreset.PRIMARY_CONSUMER: PresetProfile(
        traits=(
            AlleleRange("size", 0.7, 0.6, 0.5, 0.4),
            AlleleRange("color", 0.7, 0.6, 0.5, 0.5),
            AlleleRange("body_shape", 0.4, 0.6, 0.3, 0.4),
            AlleleRange("skin_texture", 0.3, 0.7, 0.2, 0.5),
            AlleleRange("speed", 1.5, 1.0, 1.0, 0.8),
            AlleleRange("aggressiveness", 0.3, 0.4, 0.1, 0.3),
            AlleleRange("intelligence", 0.4, 0.4, 0.2, 0.3),
            AlleleRange("social_behavior", 0.6, 0.4, 0.4, 0.3),
            AlleleRange("metabolism_rate", 0.8, 0.4, 0.6, 0.3),
            AlleleRange("reproduction_chance", 0.002, 0.001, 0.001, 0.001),
            AlleleRange("lifespan", 0.6, 0.4, 0.4, 0.3),
            AlleleRange("immune_system", 0.5, 0.5, 0.3, 0.4),
            AlleleRange("water_dependency", 0.6, 0.4, 0.4, 0.3),
            AlleleRange("temperature_tolerance", 0.7, 0.6, 0.5, 0.4),
            AlleleRange("radiation_resistance", 0.3, 0.4, 0.2, 0.3),
            AlleleRange("toxin_resistance", 0.4, 0.4, 0.2, 0.3),
            SpecialTraitRange("camouflage", 0.08, 0.4, 0.6),
            SpecialTraitRange("night_vision", 0.1, 0.5, 0.5),
            SpecialTraitRange("regeneration", 0.03, 0.3, 0.5),
        ),
        mutation_rate_low=0.04,
        mutation_rate_span=0.04,
        mutation_intensity_low=0.18,
        mutation_intensity_span=0.12,
    ),
    # Predators: fast, aggressive, clever, slow to breed, often pre-adapted
    SpeciesPreset.SECONDARY_CONSUMER: PresetProfile(
        traits=(
            AlleleRange("size", 1.0, 0.5, 0.8, 0.4),
            AlleleRange("color", 0.6, 0.4, 0.4, 0.3),
            AlleleRange("body_shape", 0.6, 0.4, 0.4, 0.3),
            AlleleRange("skin_texture", 0.5, 0.5, 0.3, 0.4),
            AlleleRange("speed", 2.0, 1.5, 1.5, 1.0),
            AlleleRange("aggressiveness", 0.7, 0.3, 0.5, 0.3),
            AlleleRange("intelligence", 0.6, 0.4, 0.4, 0.3),
            AlleleRange("social_behavior", 0.4, 0.6, 0.2, 0.4),
            AlleleRange("metabolism_rate", 1.0, 0.5, 0.8, 0.4),
            AlleleRange("reproduction_chance", 0.001, 0.0005, 0.0005, 0.0005),
            AlleleRange("lifespan", 0.7, 0.3, 0.5, 0.3),
            AlleleRange("immune_system", 0.7, 0.3, 0.5, 0.3),
            AlleleRange("water_dependency", 0.5, 0.3, 0.3, 0.3),
            AlleleRange("temperature_tolerance", 0.8, 0.4, 0.6, 0.3),
            AlleleRange("radiation_resistance", 0.4, 0.3, 0.3, 0.2),
            AlleleRange("toxin_resistance", 0.6, 0.4, 0.4, 0.3),
            SpecialTraitRange("camouflage", 0.15, 0.6, 0.4),
            SpecialTraitRange("night_vision", 0.25, 0.7, 0.3),
            SpecialTraitRange("regeneration", 0.05, 0.4, 0.4),
        ),
        mutation_rate_low=0.03,
        mutation_rate_span=0.03,
        mutation_intensity_low=0.15,
        mutation_intensity_span=0.1,
    ),
}


def _resolve_preset(preset: Union[SpeciesPreset, str, None]) -> Optional[SpeciesPreset]:
    if isinstance(preset, SpeciesPreset):
        return preset
    try:
        return SpeciesPreset(preset)
    except ValueError:
        return None


def create_random_genome(
    preset: Union[SpeciesPreset, str, None],
    rng: Optional[random.Random] = None,
    *,
    sink: Optional[NotificationSink] = None,
) -> Genome:
    """Create a founding genome for *preset*.

    Every trait the preset declares is sampled independently, followed by
    the mutation rate and intensity. Traits the preset does not declare keep
    the schema defaults. Unknown presets yield a schema-default genome.

    Args:
        preset: A SpeciesPreset or its element-type value ("plant", ...)
        rng: Random number generator (required)
        sink: Optional notification sink attached to the new genome

    Returns:
        A new Genome carrying *rng* and *sink*
    """
    rng = require_rng_param(rng, "create_random_genome")
    resolved = _resolve_preset(preset)
    if resolved is None:
        logger.warning("Unknown species preset %r; using default genome", preset)
        return Genome(rng=rng, sink=sink)

    profile = PRESET_PROFILES[resolved]
    traits = {entry.name: entry.sample(rng) for entry in profile.traits}
    return Genome(
        traits=traits,
        base_mutation_rate=profile.mutation_rate_low + rng.random() * profile.mutation_rate_span,
        mutation_intensity=(
            profile.mutation_intensity_low + rng.random() * profile.mutation_intensity_span
        ),
        rng=rng,
        sink=sink,
    )
