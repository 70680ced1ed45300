"""
Constants declarations for decipin
"""

# Anchor letters; digit 0 maps to the anchor, digit 9 to anchor + 9
DECIPIN_START_HI = 'A'  # first two fractional latitude digits (A-J)
DECIPIN_START_LO = 'Q'  # last two fractional latitude digits (Q-Z)

DECIPIN_BOUNDS = {
    'min_lat': 0.,
    'max_lat': 99.9999,
    'min_lon': 0.,
    'max_lon': 99.9999,
}

# Inserted after the 4th and 8th significant characters
DECIPIN_SEPARATORS = ('.', '/')

# Fixed-point layout of each axis: 2 integer digits + 4 fractional digits
GRID_PRECISION = 4
FIELD_WIDTH = 6
CELL_SIZE = 10 ** -GRID_PRECISION
CODE_LENGTH = 12

# Appended after the 4 known fractional digits to land on the cell center
CELL_CENTER_DIGIT = '5'
