"""Configuration package for the Ecosse genetics and food-web core.

Tuning constants live in ``ecosse.config.genetics`` and
``ecosse.config.foodweb``; ``ecosse.config.simulation_config`` groups the
runtime-adjustable food-web values into dataclasses.
"""

from ecosse.config.simulation_config import CascadeConfig, FoodWebConfig, PredationFactors

__all__ = [
    "CascadeConfig",
    "FoodWebConfig",
    "PredationFactors",
]
