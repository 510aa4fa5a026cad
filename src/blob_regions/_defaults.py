"""Default parameters shared by the Region constructors and rasterisation.

Every default can be overridden per call through the matching keyword
argument; nothing here is read from the environment.
"""

# A mask cell is set when its value is strictly greater than this.
DEFAULT_MASK_THRESHOLD = 0

# Value written to set cells by ``Region.to_mask`` for non-boolean dtypes.
DEFAULT_MASK_FOREGROUND = 255

# (x, y) position of a mask within its parent coordinate space.
DEFAULT_OFFSET = (0, 0)
