from __future__ import annotations

from typing import Any, Dict

# lower bound of each depth bucket (km); upper bounds are the next entry, inclusive
DEPTH_INTERVALS = (0, 10, 30, 50, 70, 90)
DEPTH_COLORS = ("#98ee00", "#d4ee00", "#eecc00", "#ee9c00", "#ea822c", "#ea2c2c")

PLATE_STYLE = {"color": "orange", "weight": 2}


def color_for_depth(depth: float) -> str:
    """
    Negative depths land in the shallowest bucket. Anything that compares
    false against every threshold (> 90, NaN) gets the deepest color.
    """
    if depth <= 10:
        return DEPTH_COLORS[0]
    elif depth <= 30:
        return DEPTH_COLORS[1]
    elif depth <= 50:
        return DEPTH_COLORS[2]
    elif depth <= 70:
        return DEPTH_COLORS[3]
    elif depth <= 90:
        return DEPTH_COLORS[4]
    return DEPTH_COLORS[5]


def radius_for_magnitude(magnitude: float) -> float:
    # zero-magnitude events would otherwise be invisible
    if magnitude == 0:
        return 1
    return magnitude * 4


def marker_style(depth: float, magnitude: float) -> Dict[str, Any]:
    return {
        "color": "#000000",
        "weight": 1,
        "opacity": 1,
        "fill": True,
        "fill_color": color_for_depth(depth),
        "fill_opacity": 0.8,
        "radius": radius_for_magnitude(magnitude),
    }
