"""Genome class for the ecosystem's genetic inheritance model.

A genome is an ordered mapping of trait name to allele pair plus a few
scalar settings that govern how it mutates and how strongly it expresses.
Combining two genomes seeds a child by Mendelian allele selection with
occasional crossover, after which the child immediately self-mutates.
"""

import logging
import math
import random
from dataclasses import InitVar, dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from ecosse.config.genetics import (
    CROSSOVER_CHANCE,
    CROSSOVER_MAX_FRACTION,
    DEFAULT_BASE_MUTATION_RATE,
    DEFAULT_EXPRESSION_STRENGTH,
    DEFAULT_GENERATION,
    DEFAULT_MUTATION_INTENSITY,
    DOMINANT_EXPRESSION_WEIGHT,
    NEUTRAL_COMPATIBILITY,
    RECESSIVE_EXPRESSION_WEIGHT,
)
from ecosse.events.domain_events import GeneticReproductionEvent, MutationOccurredEvent
from ecosse.events.event_bus import NotificationSink
from ecosse.genetics.mutation import (
    Allele,
    CrossoverEvent,
    MutationEvent,
    apply_mutation,
    choose_mutation_kind,
)
from ecosse.genetics.trait import (
    AlleleValue,
    Trait,
    build_traits,
    coerce_trait,
    is_numeric_allele,
)
from ecosse.genetics.validation import validate_genome
from ecosse.util.rng import resolve_rng

logger = logging.getLogger(__name__)

HistoryEvent = Union[MutationEvent, CrossoverEvent]


def _clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


def _finite_or(value: float, default: float) -> float:
    return value if math.isfinite(value) else default


@dataclass
class Genome:
    """Represents the complete genetic makeup of an ecosystem element.

    Attributes:
        traits: Trait name -> allele pair, in fixed schema order
        base_mutation_rate: Per-allele mutation chance in [0, 1]
        mutation_intensity: Scale of POINT/JUMP steps in [0, 1]
        expression_strength: Multiplier applied to expressed numeric traits (>= 0)
        generation: 1 for founders, max(parent generations) + 1 for offspring
        mutation_history: Append-only log of mutation and crossover events
        rng: Generator used when a method is called without ``rng=``
        sink: Where reproduction and mutation notifications are published
        fill_schema: When False, carry exactly the given traits instead of
            completing them with schema defaults
    """

    traits: Dict[str, Trait] = field(default_factory=dict)
    base_mutation_rate: float = DEFAULT_BASE_MUTATION_RATE
    mutation_intensity: float = DEFAULT_MUTATION_INTENSITY
    expression_strength: float = DEFAULT_EXPRESSION_STRENGTH
    generation: int = DEFAULT_GENERATION
    mutation_history: List[HistoryEvent] = field(default_factory=list)
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)
    sink: Optional[NotificationSink] = field(default=None, repr=False, compare=False)
    fill_schema: InitVar[bool] = True

    def __post_init__(self, fill_schema: bool) -> None:
        # Own private copies of every trait
        if fill_schema:
            self.traits = build_traits(self.traits)
        else:
            self.traits = {name: coerce_trait(raw) for name, raw in self.traits.items()}
        for trait in self.traits.values():
            trait.ensure_order()
        self.base_mutation_rate = _clamp(
            _finite_or(float(self.base_mutation_rate), DEFAULT_BASE_MUTATION_RATE), 0.0, 1.0
        )
        self.mutation_intensity = _clamp(
            _finite_or(float(self.mutation_intensity), DEFAULT_MUTATION_INTENSITY), 0.0, 1.0
        )
        self.expression_strength = max(
            0.0, _finite_or(float(self.expression_strength), DEFAULT_EXPRESSION_STRENGTH)
        )
        self.mutation_history = list(self.mutation_history)

    # =========================================================================
    # Reproduction
    # =========================================================================

    def combine(
        self,
        other: "Genome",
        *,
        rng: Optional[random.Random] = None,
        sink: Optional[NotificationSink] = None,
    ) -> "Genome":
        """Create a child genome from this genome and *other*.

        For every trait both parents carry, one allele is drawn from each
        parent (two independent coin flips) to seed the child's dominant and
        recessive alleles. Each trait then has a 10% chance of crossover,
        which blends the two seeded alleles by a fraction in [0, 0.3).
        Traits present in only one parent, or whose allele kinds differ
        between parents, are skipped and absent from the child.

        The child averages both parents' configuration scalars, copies the
        first parent's mutation history, appends its crossovers, then
        mutates itself before being returned.
        """
        rng = resolve_rng(rng, self.rng, "Genome.combine")
        sink = sink if sink is not None else self.sink
        generation = max(self.generation, other.generation) + 1

        child_traits: Dict[str, Trait] = {}
        crossovers: List[CrossoverEvent] = []
        for name, trait in self.traits.items():
            other_trait = other.traits.get(name)
            if other_trait is None:
                continue
            if trait.is_numeric != other_trait.is_numeric:
                logger.warning("Skipping trait %s: allele kinds differ between parents", name)
                continue

            own = trait.dominant if rng.random() < 0.5 else trait.recessive
            theirs = other_trait.dominant if rng.random() < 0.5 else other_trait.recessive
            seeded = Trait(own, theirs)

            if rng.random() < CROSSOVER_CHANCE:
                amount = rng.random() * CROSSOVER_MAX_FRACTION
                if seeded.is_numeric:
                    old_dominant, old_recessive = seeded.dominant, seeded.recessive
                    seeded.dominant = old_dominant * (1 - amount) + old_recessive * amount
                    seeded.recessive = old_recessive * (1 - amount) + old_dominant * amount
                    crossovers.append(
                        CrossoverEvent(
                            trait=name,
                            amount=amount,
                            old_dominant=old_dominant,
                            old_recessive=old_recessive,
                            new_dominant=seeded.dominant,
                            new_recessive=seeded.recessive,
                            generation=generation,
                        )
                    )
                    logger.debug("Crossover on %s (amount=%.3f)", name, amount)

            seeded.ensure_order()
            child_traits[name] = seeded

        child = Genome(
            traits=child_traits,
            base_mutation_rate=(self.base_mutation_rate + other.base_mutation_rate) / 2,
            mutation_intensity=(self.mutation_intensity + other.mutation_intensity) / 2,
            expression_strength=(self.expression_strength + other.expression_strength) / 2,
            generation=generation,
            mutation_history=[*self.mutation_history, *crossovers],
            rng=rng,
            sink=sink,
            fill_schema=False,
        )
        child.mutate(rng=rng, sink=sink)

        if sink is not None:
            sink.emit(
                GeneticReproductionEvent(
                    parent1_traits=self.trait_snapshot(),
                    parent2_traits=other.trait_snapshot(),
                    child_traits=child.trait_snapshot(),
                    crossover_events=tuple(crossovers),
                    generation=child.generation,
                )
            )
        return child

    def mutate(
        self,
        *,
        rng: Optional[random.Random] = None,
        sink: Optional[NotificationSink] = None,
    ) -> List[MutationEvent]:
        """Randomly mutate alleles in place.

        Every trait rolls once for its dominant and once for its recessive
        allele against ``base_mutation_rate``. Categorical alleles roll but
        never change. Dominant >= recessive is restored per trait afterwards.

        Returns:
            The mutation events applied by this call (also appended to
            ``mutation_history``).
        """
        rng = resolve_rng(rng, self.rng, "Genome.mutate")
        sink = sink if sink is not None else self.sink
        events: List[MutationEvent] = []

        for name, trait in self.traits.items():
            for allele in (Allele.DOMINANT, Allele.RECESSIVE):
                if rng.random() >= self.base_mutation_rate:
                    continue
                kind = choose_mutation_kind(rng)
                old_value = getattr(trait, allele.value)
                if not is_numeric_allele(old_value):
                    continue
                new_value, magnitude = apply_mutation(
                    name, old_value, allele, kind, self.mutation_intensity, rng
                )
                setattr(trait, allele.value, new_value)
                event = MutationEvent(
                    trait=name,
                    allele=allele,
                    old_value=old_value,
                    new_value=new_value,
                    magnitude=magnitude,
                    kind=kind,
                    generation=self.generation,
                )
                events.append(event)
                logger.debug(
                    "Mutation %s on %s.%s: %.4f -> %.4f",
                    kind.value,
                    name,
                    allele.value,
                    old_value,
                    new_value,
                )
                if sink is not None:
                    sink.emit(MutationOccurredEvent(mutation=event))
            trait.ensure_order()

        self.mutation_history.extend(events)
        return events

    # =========================================================================
    # Expression and comparison
    # =========================================================================

    def express_traits(self) -> Dict[str, AlleleValue]:
        """Translate allele pairs into phenotype values.

        Numeric traits blend 70% dominant with 30% recessive, scaled by
        ``expression_strength``. Categorical traits express their dominant
        allele; a trait whose dominant allele is None is left out entirely.
        """
        phenotype: Dict[str, AlleleValue] = {}
        for name, trait in self.traits.items():
            if trait.is_numeric:
                phenotype[name] = self.expressed_value(name)
            elif trait.dominant is not None:
                phenotype[name] = trait.dominant
        return phenotype

    def expressed_value(self, name: str) -> Optional[float]:
        """Return the expressed value of a numeric trait, or None if absent."""
        trait = self.traits.get(name)
        if trait is None or not trait.is_numeric:
            return None
        return (
            trait.dominant * DOMINANT_EXPRESSION_WEIGHT
            + trait.recessive * RECESSIVE_EXPRESSION_WEIGHT
        ) * self.expression_strength

    def calculate_compatibility(self, other: Optional["Genome"]) -> float:
        """Calculate genetic compatibility with *other* (0.0-1.0).

        Each shared numeric trait scores ``1 - mean(|dominant diff|,
        |recessive diff|)``, floored at 0; the result is the mean score.
        Genomes with no shared numeric trait are neutral (0.5).
        """
        if other is None:
            return 0.0

        scores: List[float] = []
        for name, trait in self.traits.items():
            other_trait = other.traits.get(name)
            if other_trait is None or not (trait.is_numeric and other_trait.is_numeric):
                continue
            dominant_diff = abs(trait.dominant - other_trait.dominant)
            recessive_diff = abs(trait.recessive - other_trait.recessive)
            scores.append(max(0.0, 1.0 - (dominant_diff + recessive_diff) / 2))

        if not scores:
            return NEUTRAL_COMPATIBILITY
        return _clamp(sum(scores) / len(scores), 0.0, 1.0)

    # =========================================================================
    # Introspection
    # =========================================================================

    def trait_snapshot(self) -> Dict[str, Tuple[AlleleValue, AlleleValue]]:
        """Return an immutable copy of every allele pair."""
        return {name: trait.as_tuple() for name, trait in self.traits.items()}

    def debug_snapshot(self) -> Dict[str, Any]:
        """Return a compact, stable dict for logging/debugging."""
        return {
            "generation": self.generation,
            "base_mutation_rate": round(self.base_mutation_rate, 4),
            "mutation_intensity": round(self.mutation_intensity, 4),
            "expression_strength": round(self.expression_strength, 4),
            "mutations": sum(1 for e in self.mutation_history if isinstance(e, MutationEvent)),
            "crossovers": sum(1 for e in self.mutation_history if isinstance(e, CrossoverEvent)),
            "traits": self.trait_snapshot(),
        }

    def validate(self) -> Dict[str, Any]:
        """Validate alleles and settings; returns a dict with any issues found."""
        issues = validate_genome(self, path="genome")
        return {"ok": not issues, "issues": issues}

    def assert_valid(self) -> None:
        """Raise ValueError if validation finds problems (debug aid)."""
        result = self.validate()
        if result["ok"]:
            return
        issues = "\n".join(result["issues"])
        raise ValueError(f"Invalid genome:\n{issues}")

    def __str__(self) -> str:
        lines = ["Genome:"]
        for name, trait in self.traits.items():
            lines.append(f"  {name}: D={trait.dominant}, R={trait.recessive}")
        return "\n".join(lines)
