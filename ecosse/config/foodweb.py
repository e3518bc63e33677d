"""Food-web tuning constants and seed data."""

# Fraction of energy that survives one trophic step (ecological 10% rule)
ENERGY_TRANSFER_EFFICIENCY = 0.1

# Energy assumed for prey that does not expose an "energy" attribute
DEFAULT_PREY_ENERGY = 10.0

# Predation success model
BASE_PREDATION_SUCCESS = 0.5
SPEED_FACTOR = 0.4
SIZE_FACTOR = 0.3
HEALTH_FACTOR = 0.2
INTELLIGENCE_FACTOR = 0.1
MIN_PREDATION_SUCCESS = 0.1
MAX_PREDATION_SUCCESS = 0.9
DEFAULT_INTELLIGENCE = 0.5

# Cascade effects
CASCADE_ENABLED = True
CASCADE_MAX_DEPTH = 3
CASCADE_STRENGTH_DECAY = 0.7
TERTIARY_CASCADE_SCALE = 0.5  # Tertiary consumers feel half of a predator loss

# Seed element types
PLANT = "plant"
CREATURE = "creature"
PREDATOR = "predator"
TRIBE = "tribe"
FUNGUS = "fungus"

# Seed registry: element type -> trophic level value
DEFAULT_TROPHIC_LEVELS = {
    PLANT: 0,
    CREATURE: 1,
    PREDATOR: 2,
    TRIBE: 3,
    FUNGUS: 4,
}

# Seed predator -> prey graph
DEFAULT_PREY_MAP = {
    CREATURE: (PLANT,),
    PREDATOR: (CREATURE,),
    TRIBE: (CREATURE, PLANT),
}
