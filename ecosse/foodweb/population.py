"""Population ledger: live element counts per type.

The ledger is updated incrementally from element created/removed
notifications and can be rebuilt from a full element list. Counts never go
negative; callers only ever receive copies.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from ecosse.exceptions import PopulationError

logger = logging.getLogger(__name__)


def _element_type_of(element: Any) -> Optional[str]:
    if isinstance(element, str):
        return element
    return getattr(element, "element_type", None)


class PopulationLedger:
    """Tracks how many live elements of each type exist.

    Attributes:
        total_created: Creation notifications seen since construction
        total_removed: Removal notifications that decremented a count
    """

    def __init__(self, element_types: Iterable[str] = ()) -> None:
        self._counts: Dict[str, int] = {}
        self.total_created: int = 0
        self.total_removed: int = 0
        for element_type in element_types:
            self.track(element_type)

    def track(self, element_type: str) -> None:
        """Open a zero entry for *element_type* if it has none yet."""
        self._counts.setdefault(element_type, 0)

    def on_element_created(self, element_type: str) -> int:
        """Increment the count for *element_type*; returns the new count."""
        self._counts[element_type] = self._counts.get(element_type, 0) + 1
        self.total_created += 1
        return self._counts[element_type]

    def on_element_removed(self, element_type: str) -> int:
        """Decrement the count for *element_type*, floored at 0; returns the new count."""
        current = self._counts.get(element_type, 0)
        if current > 0:
            self.total_removed += 1
        else:
            logger.debug("Removal of %s with no live count recorded", element_type)
        self._counts[element_type] = max(0, current - 1)
        return self._counts[element_type]

    def set_count(self, element_type: str, count: int) -> None:
        """Overwrite the count for *element_type*.

        Raises:
            PopulationError: If *count* is negative
        """
        if count < 0:
            raise PopulationError(f"population count for {element_type} cannot be negative ({count})")
        self._counts[element_type] = int(count)

    def reset(self) -> None:
        """Zero every tracked count (keys are kept)."""
        for element_type in self._counts:
            self._counts[element_type] = 0

    def rebuild(self, elements: Iterable[Any]) -> None:
        """Reset and recount from a full element list.

        Elements may be type strings or objects exposing ``element_type``;
        anything else is ignored.
        """
        self.reset()
        for element in elements:
            element_type = _element_type_of(element)
            if element_type is None:
                continue
            self._counts[element_type] = self._counts.get(element_type, 0) + 1

    def count_of(self, element_type: str) -> int:
        return self._counts.get(element_type, 0)

    def counts_snapshot(self) -> Dict[str, int]:
        """Return a copy of all counts."""
        return dict(self._counts)
