"""Fixed policy values for gallery and sidebar tile sizing.

These are not user configuration. Callers that need different values should
pass them explicitly where a function accepts them.
"""

# The absolute max number of on-screen tiles with video.
# The video bridge relays at most 24 streams to any endpoint.
MAX_ONSCREEN_TILES = 25
MAX_TILES_GRID_SIZE = 5  # isqrt(MAX_ONSCREEN_TILES)

# Sidebar tiles. DEFAULT_TILE_WIDTH also controls the minimal sidebar width.
DEFAULT_TILE_WIDTH = 200
DEFAULT_TILE_AR = 3 / 2

# Upper limit of the tile aspect ratio, used when comparing tile areas.
DEFAULT_MAX_TILE_AR = 2.0
CAPPED_MAX_TILE_AR = 1.85  # when a column cap is active

# Tile counts that may be laid out as a square grid.
SQUARE_TILE_COUNTS = (4, 9, 16, 25)

# CLI defaults
DEFAULT_RESOLUTION = "1280x720"
DEFAULT_MIN_TILE_AR = 16 / 9

# Preview colors
BACKGROUND_COLOR = (32, 33, 36)
TILE_COLOR = (95, 99, 104)
TILE_OUTLINE_COLOR = (232, 234, 237)
