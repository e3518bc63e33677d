"""Ecosse: genetic inheritance and food-web simulation core.

The core decides, every simulation tick, which organisms can eat which and
with what probability, and how traits pass from parents to offspring.
"""

from ecosse.events import EventBus
from ecosse.foodweb import FoodWebSystem, TrophicLevel, TrophicRegistry
from ecosse.genetics import Genome, SpeciesPreset, create_random_genome
from ecosse.organism import OrganismView

__all__ = [
    "EventBus",
    "FoodWebSystem",
    "Genome",
    "OrganismView",
    "SpeciesPreset",
    "TrophicLevel",
    "TrophicRegistry",
    "create_random_genome",
]
