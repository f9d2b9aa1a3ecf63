from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import folium


@dataclass(frozen=True)
class TileSource:
    name: str
    url: str
    attribution: str


BASEMAP = TileSource(
    name="Basemap",
    url="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
    attribution='&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors',
)

STREET = TileSource(
    name="Street",
    url="https://{s}.tile.stamen.com/toner/{z}/{x}/{y}.png",
    attribution='&copy; <a href="https://stamen.com/">Stamen Design</a>',
)

# continental USA centroid
USA_CENTER = (37.0902, -95.7129)


@dataclass(frozen=True)
class MapConfig:
    center: Tuple[float, float] = USA_CENTER
    zoom: int = 4
    control_scale: bool = True
    base_layers: Tuple[TileSource, ...] = (BASEMAP, STREET)
    legend_position: str = "bottomright"
    collapsed_control: bool = True


def create_map_view(cfg: Optional[MapConfig] = None) -> Tuple[folium.Map, Dict[str, folium.TileLayer]]:
    """
    Build the map canvas and register the background tile layers.
    The first tile source is the one shown on opening; the others start hidden
    and are only reachable through the layer control.
    """
    cfg = cfg or MapConfig()

    m = folium.Map(
        location=list(cfg.center),
        zoom_start=cfg.zoom,
        tiles=None,
        control_scale=cfg.control_scale,
    )

    base_layers: Dict[str, folium.TileLayer] = {}
    for i, src in enumerate(cfg.base_layers):
        layer = folium.TileLayer(
            tiles=src.url,
            attr=src.attribution,
            name=src.name,
            overlay=False,
            control=True,
            show=(i == 0),
        )
        layer.add_to(m)
        base_layers[src.name] = layer

    return m, base_layers
