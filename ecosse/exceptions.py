"""Ecosse exception hierarchy.

Centralised base classes so callers can catch genetics or food-web failures
without resorting to bare ``except Exception`` blocks.
"""


class EcosseError(Exception):
    """Root of all Ecosse domain exceptions."""


class SimulationError(EcosseError):
    """Errors raised while running genetics or food-web operations."""


class GeneticsError(SimulationError):
    """Genome construction, inheritance, or mutation failure."""


class AlleleMismatchError(GeneticsError):
    """A single trait holds one numeric and one categorical allele."""


class PopulationError(SimulationError):
    """Invalid population ledger request (e.g. a negative count)."""


class ConfigurationError(EcosseError):
    """Invalid or missing configuration."""
