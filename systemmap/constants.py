# Parent relation tags found in the "Parents" list of a body's metadata
ANCHOR_TAG = "Null"
RING_TAG = "Ring"
STAR_TAG = "Star"
PLANET_TAG = "Planet"

# The arrival star of every system has this body id
PRIMARY_STAR_BODY_ID = 0

# Used in table exports for bodies without a parent in the tree
NO_PARENT_ID = -1

# Icon size band, in pixels
ICON_MIN_SIZE = 32
ICON_MAX_STAR_SIZE = 256
ICON_MAX_PLANET_SIZE = 128
ICON_BELT_SIZE = 64

# Quarter power compresses several orders of magnitude of mass into the size band
ICON_SCALE_POWER = 0.25

# Substituted for missing or zero masses so the size curve never starts at zero
MIN_BODY_MASS = 0.001
MIN_STAR_MAX_MASS = 0.01
MIN_PLANET_MAX_MASS = 0.0001

# Returned as maximum mass when a category has no body with a positive mass
DEFAULT_MAX_MASS = 1.0
