"""
Configuration defaults for layout and view state.

Values are read once from environment variables at import time so an
embedder can tune spacing and zoom limits without code changes.

Usage:
    from famchart.config.settings import get_setting

    h_gap = get_setting('h_gap')

Environment Variables:
    FAMCHART_H_GAP=40         - Horizontal gap between nodes in a row
    FAMCHART_V_GAP=80         - Vertical gap between generation rows
    FAMCHART_NODE_WIDTH=120   - Default node width
    FAMCHART_NODE_HEIGHT=60   - Default node height
    FAMCHART_MIN_ZOOM=0.1     - Lower zoom bound
    FAMCHART_MAX_ZOOM=8.0     - Upper zoom bound
    FAMCHART_ZOOM_STEP=1.1    - Multiplicative zoom in/out step
"""

import os
from typing import Dict


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


SETTINGS: Dict[str, float] = {
    # Layout spacing
    'h_gap': _env_float('FAMCHART_H_GAP', 40.0),
    'v_gap': _env_float('FAMCHART_V_GAP', 80.0),

    # Node metrics fallback
    'node_width': _env_float('FAMCHART_NODE_WIDTH', 120.0),
    'node_height': _env_float('FAMCHART_NODE_HEIGHT', 60.0),

    # Viewport
    'min_zoom': _env_float('FAMCHART_MIN_ZOOM', 0.1),
    'max_zoom': _env_float('FAMCHART_MAX_ZOOM', 8.0),
    'zoom_step': _env_float('FAMCHART_ZOOM_STEP', 1.1),
}


def get_setting(name: str) -> float:
    """
    Look up a configuration value.

    Args:
        name: Setting name (e.g., 'h_gap')

    Returns:
        Current value

    Raises:
        KeyError: If setting name is not recognized

    Example:
        >>> get_setting('max_zoom')
        8.0
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    return SETTINGS[name]


def get_all_settings() -> Dict[str, float]:
    """Return a copy of all settings."""
    return SETTINGS.copy()


def set_setting(name: str, value: float) -> None:
    """
    Override a setting programmatically (for testing only).

    Args:
        name: Setting name
        value: New value

    Warning:
        Objects already constructed keep the values they were built with.
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    SETTINGS[name] = float(value)
