"""Food-web model: trophic levels, populations, predation, and cascades."""

from ecosse.foodweb.cascade import CascadeEffect, CascadePropagator
from ecosse.foodweb.population import PopulationLedger
from ecosse.foodweb.predation import (
    OrganismRef,
    PredationEvaluator,
    PredationOutcome,
    calculate_energy_transfer,
)
from ecosse.foodweb.system import FoodWebSystem
from ecosse.foodweb.trophic import TrophicLevel, TrophicRegistry

__all__ = [
    "CascadeEffect",
    "CascadePropagator",
    "FoodWebSystem",
    "OrganismRef",
    "PopulationLedger",
    "PredationEvaluator",
    "PredationOutcome",
    "TrophicLevel",
    "TrophicRegistry",
    "calculate_energy_transfer",
]
