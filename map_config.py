"""Configuration defaults for the world map generator (env-overridable)."""

import os

from force_layout import DEFAULT_ITERATIONS, ForceSettings

# -----------------------------
# Canvas / run
# -----------------------------

MAP_WIDTH = float(os.environ.get("MAP_WIDTH", "5000"))
MAP_HEIGHT = float(os.environ.get("MAP_HEIGHT", "5000"))
LAYOUT_ITERATIONS = int(os.environ.get("LAYOUT_ITERATIONS", str(DEFAULT_ITERATIONS)))

# Output
MAP_TITLE = os.environ.get("MAP_TITLE", "Game World Map")
MAP_FILENAME = os.environ.get("MAP_FILENAME", "world-map.html")
MAP_DPI = int(os.environ.get("MAP_DPI", "150"))


def force_settings_from_env() -> ForceSettings:
    """ForceSettings with any LAYOUT_* overrides from the environment."""
    d = ForceSettings()
    return ForceSettings(
        repulsion=float(os.environ.get("LAYOUT_REPULSION", d.repulsion)),
        spring_constant=float(os.environ.get("LAYOUT_SPRING", d.spring_constant)),
        spring_length=float(os.environ.get("LAYOUT_SPRING_LENGTH", d.spring_length)),
        damping=float(os.environ.get("LAYOUT_DAMPING", d.damping)),
        direction_bias=float(os.environ.get("LAYOUT_DIRECTION_BIAS", d.direction_bias)),
    )
