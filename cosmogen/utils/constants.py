"""Generation tuning constants."""

import math

# Universe
DEFAULT_SIZE_RANGE = (40000, 300000)  # Galaxy diameter range in light-years
MIN_GALAXY_SIZE = 1  # Smallest accepted galaxy diameter
RNG_SEED_DEFAULT = 12345  # Default seed for the CLI and testing
RANDOM_ROOT_SEED_BITS = 30  # Width of a randomly chosen root seed

# Galaxy
GALAXY_AGE_RANGE = (2e9, 13.5e9)  # Years
GALAXY_DENSITY_RANGE = (0.2, 1.2)  # Stars per 1000 ly of diameter
MIN_STARS_PER_GALAXY = 20
STAR_SEED_SPAN = 1e9
FEATURES_SALT = 0x9E3779B9  # Decorrelates the features stream from the main stream
MAX_PHENOMENA_PER_GALAXY = 4  # Exclusive upper bound
MAX_STRUCTURES_PER_GALAXY = 5  # Exclusive upper bound

# Seed derivation multipliers (child seed = parent ^ (index * multiplier))
STAR_INDEX_MULTIPLIER = 131
PLANET_INDEX_MULTIPLIER = 977
MOON_INDEX_MULTIPLIER = 1013
PHENOMENON_INDEX_MULTIPLIER = 7919
STRUCTURE_INDEX_MULTIPLIER = 104729

# Local stream offsets (stream seed = seed + index * offset)
PLANET_STREAM_OFFSET = 911
MOON_STREAM_OFFSET = 337
PHENOMENON_STREAM_OFFSET = 719
STRUCTURE_STREAM_OFFSET = 1021

# Star
STAR_SIZE_RANGE = (0.5, 4.5)
STAR_RADIUS_SCALE = 20
MAX_EXTRA_PLANETS = 6  # floor(draw * 6) planets on top of the base count
SLOT_SPACING_BASE = 20  # Progressive orbit spacing per planet index
SLOT_SPACING_SPAN = 30
MAX_ECCENTRICITY = 0.4
SLOT_ECCENTRICITY_SCALE = 0.3
SLOT_INCLINATION_SPAN = 15  # Degrees, centred on zero
SLOT_ROTATION_BASE = 0.1
SLOT_ROTATION_SPAN = 0.3
SLOT_TILT_SPAN = 45  # Degrees, centred on zero
MIN_SLOT_ORBIT_SPEED = 0.001
SLOT_ORBIT_SPEED_SCALE = 0.05

# Planet
EARTH_RADIUS_KM = 6371
PLANET_SIZE_DIVISOR = 8000
MIN_PLANET_SIZE = 0.5
MIN_GRAVITY_G = 0.05
GRAVITY_MULTIPLIER_RANGE = (0.4, 2.0)
ROCKY_RADIUS_RANGE = (1500, 12000)
GASEOUS_RADIUS_RANGE = (25000, 70000)
HABITABLE_FORCE_THRESHOLD = 0.6
ATMOSPHERE_THRESHOLD = 0.85
STATION_THRESHOLD = 0.8
ANCIENT_THRESHOLD = 0.9
TERRAFORMABLE_HABITABILITY = 0.7
STATION_HABITABILITY = 0.5
BASE_TEMPERATURE_K = 5800
TEMPERATURE_JITTER_RANGE = (0.7, 1.3)
PLANET_ORBIT_SPEED_RANGE = (0.00002, 0.00012)
PLANET_ROTATION_RANGE = (0.0005, 0.01)
PLANET_MAX_INCLINATION = math.pi / 8
PLANET_MAX_TILT = math.pi / 5

# Moon
MIN_MOON_RADIUS_KM = 200
MAX_MOON_RADIUS_KM = 3000
MOON_HOST_RADIUS_FRACTION = 0.27
MOON_DISTANCE_RANGE = (1.5, 6.0)
MOON_ORBIT_SPEED_RANGE = (0.0005, 0.004)
MIN_MOON_SIZE = 0.05

# Phenomenon
PHENOMENON_INTENSITY_RANGE = (0.1, 1.0)
PHENOMENON_GALAXY_FRACTION = 0.02
PHENOMENON_FALLBACK_RADIUS_LY = 1000

# Structure
MAX_TECH_LEVEL = 10

# Ambient colour
AMBIENT_SCALE = 0.06
AMBIENT_FLOOR = (6, 6, 10)
