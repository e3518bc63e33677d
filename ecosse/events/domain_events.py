"""Domain event definitions for the genetics and food-web core.

Events are frozen dataclasses carrying everything a handler needs; the
EventBus dispatches on their concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ecosse.genetics.mutation import CrossoverEvent, MutationEvent


@dataclass(frozen=True)
class ElementCreatedEvent:
    """An ecosystem element came into existence.

    Attributes:
        element_type: Food-web type of the element ("plant", "predator", ...)
        element_id: Optional identifier of the new element
    """

    element_type: str
    element_id: Any = None


@dataclass(frozen=True)
class ElementRemovedEvent:
    """An ecosystem element was removed.

    Attributes:
        element_type: Food-web type of the removed element
        cause: Why it was removed ("starvation", "predation", "old_age", ...)
        element_id: Optional identifier of the removed element
    """

    element_type: str
    cause: str = "unknown"
    element_id: Any = None


@dataclass(frozen=True)
class GeneticReproductionEvent:
    """Two genomes were combined into a child genome.

    Trait snapshots map trait name to a ``(dominant, recessive)`` tuple and are
    taken after the child's self-mutation.

    Attributes:
        parent1_traits: First parent's allele pairs
        parent2_traits: Second parent's allele pairs
        child_traits: Child's allele pairs
        crossover_events: Crossovers applied while seeding the child
        generation: The child's generation
    """

    parent1_traits: dict[str, tuple[Any, Any]]
    parent2_traits: dict[str, tuple[Any, Any]]
    child_traits: dict[str, tuple[Any, Any]]
    crossover_events: tuple[CrossoverEvent, ...]
    generation: int


@dataclass(frozen=True)
class MutationOccurredEvent:
    """A single allele mutated.

    Attributes:
        mutation: The structured mutation record (also kept in the genome's history)
    """

    mutation: MutationEvent


@dataclass(frozen=True)
class CascadeEffectEvent:
    """A population change rippled to an ecologically linked type.

    Attributes:
        source_type: Type whose change caused this effect
        target_type: Type receiving the effect
        interaction_kind: Always "cascade_effect"
        effect: Signed magnitude (negative = harmful to target)
        reason: "food_source_change" or "predation_pressure_change"
        cause: Root cause, or "cascade_from_<type>" for second-order effects
        depth: Recursion depth at which the effect was produced
    """

    source_type: str
    target_type: str
    interaction_kind: str
    effect: float
    reason: str
    cause: str
    depth: int
