from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import folium

from mapcore.map_data.quake_styles import DEPTH_COLORS, DEPTH_INTERVALS

_POSITIONS = {
    "bottomright": "bottom: 30px; right: 10px;",
    "bottomleft": "bottom: 30px; left: 10px;",
    "topright": "top: 10px; right: 10px;",
    "topleft": "top: 80px; left: 10px;",
}

_BOX_STYLE = (
    "position: fixed; z-index: 9999; "
    "background-color: white; padding: 6px 8px; font-size: 12px; line-height: 18px; "
    "color: #555; border-radius: 5px; box-shadow: 0 0 5px rgba(0, 0, 0, 0.2); "
    "width: auto; min-width: 130px;"
)

_SWATCH_STYLE = (
    "width: 15px; height: 15px; margin-right: 8px; border-radius: 3px; "
    "display: inline-block; vertical-align: middle;"
)


@dataclass(frozen=True)
class LegendEntry:
    color: str
    lower: float
    upper: Optional[float]  # None for the open-ended last bucket

    @property
    def label(self) -> str:
        if self.upper is None:
            return f"{self.lower}+"
        return f"{self.lower}–{self.upper}"


def legend_entries(
    intervals: Sequence[float] = DEPTH_INTERVALS,
    colors: Sequence[str] = DEPTH_COLORS,
) -> List[LegendEntry]:
    if len(intervals) != len(colors):
        raise ValueError(f"intervals and colors differ in length ({len(intervals)} vs {len(colors)})")

    out: List[LegendEntry] = []
    for i, (lower, color) in enumerate(zip(intervals, colors)):
        upper = intervals[i + 1] if i + 1 < len(intervals) else None
        out.append(LegendEntry(color=color, lower=lower, upper=upper))
    return out


def legend_html(entries: Sequence[LegendEntry], position: str = "bottomright") -> str:
    try:
        anchor = _POSITIONS[position]
    except KeyError:
        raise ValueError(f"Unknown legend position {position!r}") from None

    lines = [
        f'<i style="background-color: {e.color}; {_SWATCH_STYLE}"></i> {e.label}<br>'
        for e in entries
    ]
    return (
        f'<div class="info legend" style="{anchor} {_BOX_STYLE}">'
        + "".join(lines)
        + "</div>"
    )


def add_legend(m: folium.Map, position: str = "bottomright") -> folium.Element:
    """
    Attach the static depth legend to the map page. Built once, never refreshed.
    """
    legend = folium.Element(legend_html(legend_entries(), position=position))
    m.get_root().html.add_child(legend)
    return legend
