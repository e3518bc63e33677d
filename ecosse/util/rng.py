"""RNG utilities for deterministic simulation.

Every genetics and predation operation draws from an explicit
``random.Random`` instance so a seeded run replays exactly. These helpers
fail loudly when no generator was provided instead of silently creating an
unseeded fallback.
"""

import random
from typing import Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This indicates a bug in the caller: the simulation tick owns the generator
    and must hand it to genomes and evaluators.
    """


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def mutate(self, rng: Optional[random.Random] = None):
            rng = require_rng_param(rng or self.rng, "Genome.mutate")
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. Pass the simulation RNG explicitly."
        )
    return rng


def resolve_rng(
    rng: Optional[random.Random],
    fallback_rng: Optional[random.Random],
    context: str,
) -> random.Random:
    """Return ``rng`` if given, else the explicit fallback, else raise."""
    if rng is not None:
        return rng
    return require_rng_param(fallback_rng, context)
