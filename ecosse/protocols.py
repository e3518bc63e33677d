"""Protocol-based abstractions for the organisms the core reasons about.

The genetics and food-web core never sees concrete simulation entities.
Anything that can report its food-web type, an identifier, an optional
genome, and named numeric attributes can take part in predation and
population bookkeeping.

Design Philosophy:
-----------------
Instead of relying on truthiness checks such as ``if predator.speed``,
consumers ask ``try_get_attribute("speed")`` and handle ``None`` uniformly.
"""

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ecosse.genetics.genome import Genome


@runtime_checkable
class Organism(Protocol):
    """Protocol for elements that can hunt, be hunted, or be counted.

    Attributes read through ``try_get_attribute`` by the core:
        speed, size, health: predation ratios
        energy: energy available to a successful predator
        x, y: optional position used by proximity filters
    """

    @property
    def element_type(self) -> str:
        """Food-web type identifier ("plant", "predator", ...)."""
        ...

    @property
    def element_id(self) -> Any:
        """Identifier echoed back in predation outcomes."""
        ...

    @property
    def genome(self) -> Optional["Genome"]:
        """Genome carried by the organism, if any."""
        ...

    def try_get_attribute(self, name: str) -> Optional[float]:
        """Return a numeric attribute, or None when the organism lacks it."""
        ...
