# World geometry
UPPER_Y_VALUE = 255 #highest valid elevation (y)
SEA_LEVEL = 63

# Item stacks
MAX_STACK_SIZE = 64

# Living entities
MAX_HEALTH = 20.0
MAX_FOODLEVEL = 20.0
MOVE_FOOD_COST = 0.05
PLAYER_NAME = 'Steve'

# Terrain generation
# Noise fields are seeded with world seed + salt so each field is independent.
NOISE_SALT_LOW = 11
NOISE_SALT_HIGH = 12
NOISE_SALT_SELECTOR = 13
NOISE_SALT_DIRT = 14
NOISE_SALT_SAND = 15
# Horizontal scale applied to the combined height noise.
HEIGHT_STEP = 1.3
# Negative relief is damped so valleys are shallower than hills.
NEGATIVE_HEIGHT_DAMPING = 0.8
SAND_THRESHOLD = 8.0
DROPS_CHANCE = 0.5

# Caves: one worm per CAVE_VOLUME_PER_WORM blocks of world volume.
CAVE_VOLUME_PER_WORM = 8192
CAVE_MAX_LENGTH = 200
CAVE_PHI_DAMPING = 0.75
CAVE_STAMP_CHANCE = 0.75
CAVE_JITTER = 0.2

# Veins: (material name, abundance); one worm per VEIN_VOLUME_PER_WORM / abundance.
VEINS = (('GRANITE', 0.9), ('OBSIDIAN', 0.5))
VEIN_VOLUME_PER_WORM = 16384
VEIN_MAX_LENGTH = 75
VEIN_PHI_DAMPING = 0.9

# Liquid sources per world column.
WATER_SOURCE_DENSITY = 1.0/200
LAVA_SOURCE_DENSITY = 1.0/400

# Surface decoration
ENTITY_SPAWN_CHANCE = 0.05
ITEMS_SPAWN_CHANCE = 0.10
MONSTER_CHANCE = 0.75
FOOD_CHANCE = 0.8
TOOL_CHANCE = 0.1
# weapons take the remaining share
MAX_FOOD_AMOUNT = 5
# Catalogue index ranges (inclusive) of the random item pools.
FOOD_POOL = (8, 11)
TOOL_POOL = (12, 13)
WEAPON_POOL = (14, 15)


# Enable ANSI colors in logs.
LOG_COLOR = True

# Log one line per terrain generation stage.
LOG_GENERATION = True

# Log recoverable command failures in the game session.
LOG_SESSION = True
