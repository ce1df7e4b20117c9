# Material consumption constants — empirical site values carried over from the
# estimating spreadsheets the calculators replaced. Not validated against NBR tables.

# Commercial rebar is sold in 12 m bars
STANDARD_BAR_LENGTH_M = 12.0

# Nominal bar diameters (inches) offered for main reinforcement
DIAMETER_CLASSES = ["1/4", "5/16", "3/8", "1/2", "5/8"]
DEFAULT_DIAMETER = "3/8"

# Stirrups on beams and columns are always estimated in 3/16"
STIRRUP_DIAMETER = "3/16"

# Bag-weight constant used to turn a trace by mass into m³ of aggregate
TRACE_BAG_FACTOR = 18.0

# Footings, beams, columns — 1:5:6 trace
STRUCTURAL_CONCRETE = {
    "cement_divisor": 0.16,     # m³ of concrete per bag
    "sand_parts": 5,
    "gravel_parts": 6,
}

# Slabs and subfloors — leaner 1:4:5 trace
SLAB_CONCRETE = {
    "cement_divisor": 0.14,
    "sand_parts": 4,
    "gravel_parts": 5,
}

# Footing rebar: 20 cm cover taken off each bar
FOOTING_COVER_CM = 20.0

# Beams / columns
SPLICE_ALLOWANCE_M = 0.5        # lap added to every longitudinal bar
STIRRUP_SPACING_M = 0.15
STIRRUP_COVER_SUM_CM = 4.0      # added to width + height before doubling

CEMENT_BAG_KG = 50.0

# Masonry — 1:8 mortar
MASONRY_BLOCK_LOSS = 0.05
MASONRY_MORTAR_LOSS = 0.10
MASONRY_CEMENT_KG_PER_M3 = 216.0
MASONRY_SAND_M3_PER_M3 = 1.08

# Plaster — 1:4 mortar
PLASTER_MORTAR_LOSS = 0.10
PLASTER_CEMENT_KG_PER_M3 = 324.0
PLASTER_SAND_M3_PER_M3 = 1.3

SLAB_TYPES = ["slab", "subfloor"]
