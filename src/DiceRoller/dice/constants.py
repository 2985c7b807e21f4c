# dice/constants.py

import re

# Ordered for display; membership checks use the frozenset.
DIE_SIZES: tuple[int, ...] = (4, 6, 8, 10, 12, 20, 100)
DIE_SIZE_SET: frozenset[int] = frozenset(DIE_SIZES)

MIN_DICE_COUNT = 1
MAX_DICE_COUNT = 100

# XdY or XdY+Z / XdY-Z. Matched against the trimmed input only.
NOTATION_RE = re.compile(r"^(\d+)d(\d+)([+-]\d+)?$", re.IGNORECASE | re.ASCII)

# Widest count or die size, in significant digits ("100"). Longer groups are
# out of range without converting them.
MAX_COMPONENT_DIGITS = 3
# Longer modifiers are rejected as malformed; totals must still print.
MAX_MODIFIER_DIGITS = 1000
