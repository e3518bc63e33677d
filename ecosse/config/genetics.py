"""Genetics tuning constants."""

# Genome configuration defaults
DEFAULT_BASE_MUTATION_RATE = 0.05  # 5% chance per allele per mutate() call
DEFAULT_MUTATION_INTENSITY = 0.2  # Half-width of a POINT mutation step
DEFAULT_EXPRESSION_STRENGTH = 1.0
DEFAULT_GENERATION = 1

# Phenotype expression: weighted blend of the allele pair
DOMINANT_EXPRESSION_WEIGHT = 0.7
RECESSIVE_EXPRESSION_WEIGHT = 0.3

# Crossover during combine()
CROSSOVER_CHANCE = 0.1  # Per trait
CROSSOVER_MAX_FRACTION = 0.3  # Blend fraction drawn from [0, 0.3)

# Mutation kind weights (drawn in this order, cumulative)
POINT_MUTATION_WEIGHT = 0.85
JUMP_MUTATION_WEIGHT = 0.10
ACTIVATION_MUTATION_WEIGHT = 0.03
DEACTIVATION_MUTATION_WEIGHT = 0.02
JUMP_MUTATION_MULTIPLIER = 3.0

# Mutated numeric alleles never rest below this value
MIN_ALLELE_VALUE = 0.1

# Activation draws: value = low + rng.random() * span
DOMINANT_ACTIVATION_LOW = 0.3
DOMINANT_ACTIVATION_SPAN = 0.7
RECESSIVE_ACTIVATION_LOW = 0.2
RECESSIVE_ACTIVATION_SPAN = 0.5

# Compatibility when two genomes share no numeric trait
NEUTRAL_COMPATIBILITY = 0.5

# Traits allowed to rest at exactly 0 (inactive) and to be switched on/off
# by ACTIVATION / DEACTIVATION mutations
SPECIAL_TRAITS = frozenset({"camouflage", "night_vision", "regeneration"})
