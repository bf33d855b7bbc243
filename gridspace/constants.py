"""
Global constants used throughout the package
"""

from typing import Final

# Unit steps, (dx, dy). Y grows downwards.
DIRECTION_DELTAS: Final[dict[str, tuple[int, int]]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

DIRECTION_ARROWS: Final[dict[str, str]] = {
    "up": "↑",
    "down": "↓",
    "left": "←",
    "right": "→",
}

LOG_FORMAT: Final[str] = "%(levelname)s | %(name)s | %(message)s"

# Keys used by the serialized graph layout
NODES_KEY: Final[str] = "nodes"
EDGES_KEY: Final[str] = "edges"
