"""Lightweight Organism implementation for hosts and tests."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ecosse.genetics.genome import Genome


@dataclass
class OrganismView:
    """A read-only view of an ecosystem element.

    Attributes:
        element_type: Food-web type identifier
        element_id: Identifier echoed back in outcomes
        attributes: Named numeric attributes (speed, size, health, energy, x, y, ...)
        genome: Optional genome
    """

    element_type: str
    element_id: Any = None
    attributes: Dict[str, float] = field(default_factory=dict)
    genome: Optional[Genome] = None

    def try_get_attribute(self, name: str) -> Optional[float]:
        value = self.attributes.get(name)
        if value is None:
            return None
        try:
            value = float(value)
        except (TypeError, ValueError):
            return None
        return value if math.isfinite(value) else None
