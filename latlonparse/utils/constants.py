"""
Constants shared by the coordinate grammar rules.

Notes
-----
All bounds are in degrees. Glyph sets list every character a rule accepts
for the same delimiter; the ASCII form comes first.
"""

# --- Angle bounds ---

# Largest unsigned angle any degree component may take.
MAX_ANGLE_DEG = 360.0

# Unsigned magnitude limits applied by the hemisphere-letter rules.
MAX_LATITUDE_DEG = 90.0
MAX_LONGITUDE_DEG = 180.0

# Signed longitudes may be written in the 0-360 convention; anything at or
# above this value is rejected.
LONGITUDE_WRAP_DEG = 360.0

# Minutes and seconds must stay strictly below this value.
SEXAGESIMAL_LIMIT = 60

# --- Digit run limits ---

# The integer part of a plain decimal must be shorter than this, so that
# runs of 5-7 digits are left for the compact DDDMMSS reading.
DECIMAL_MAX_INTEGER_DIGITS = 4

# Integer digit count accepted by the compact DDDMMSS.ss form.
DMS7_MIN_DIGITS = 5
DMS7_MAX_DIGITS = 7

# --- Glyphs ---

DIGITS = "0123456789"
DECIMAL_POINT = "."
PAIR_SEPARATOR = ","
DEGREE_SIGN = "°"

# Keyboard apostrophe and Unicode PRIME (U+2032)
MINUTE_TICKS = ("'", "′")

# Keyboard double quote and Unicode DOUBLE PRIME (U+2033)
SECOND_TICKS = ('"', "″")

PLUS_MINUS = ("+", "-")
NORTH_SOUTH = ("N", "S")
EAST_WEST = ("E", "W")
