# mapcore/quake_layers.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple
import logging

import folium

from data_pipeline.geojson_normalization import Earthquake, plates_to_gdf
from mapcore.map_data.quake_styles import PLATE_STYLE, marker_style

log = logging.getLogger(__name__)

EARTHQUAKES_LAYER = "Earthquakes"
PLATES_LAYER = "Tectonic Plates"


@dataclass(frozen=True)
class QuakeMarker:
    location: Tuple[float, float]
    style: Dict[str, Any]
    popup: str


def _fmt_number(value: float) -> str:
    # 5.0 -> "5", 4.5 -> "4.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def popup_text(quake: Earthquake) -> str:
    return "Magnitude: " + _fmt_number(quake.mag) + "<br>Location: " + quake.place


def quake_marker(quake: Earthquake) -> QuakeMarker:
    return QuakeMarker(
        location=(quake.lat, quake.lon),
        style=marker_style(quake.depth_km, quake.mag),
        popup=popup_text(quake),
    )


def build_earthquake_layer(quakes: Iterable[Earthquake], name: str = EARTHQUAKES_LAYER) -> folium.FeatureGroup:
    """
    One CircleMarker per event, colored by depth and sized by magnitude,
    each with a magnitude/location popup.
    """
    group = folium.FeatureGroup(name=name, overlay=True, control=True)

    markers: List[QuakeMarker] = [quake_marker(q) for q in quakes]
    for mk in markers:
        folium.CircleMarker(
            location=list(mk.location),
            popup=folium.Popup(mk.popup),
            **mk.style,
        ).add_to(group)

    log.info("Built %r layer with %d markers", name, len(markers))
    return group


def build_plates_layer(collection: Dict[str, Any], name: str = PLATES_LAYER) -> folium.GeoJson:
    gdf = plates_to_gdf(collection)

    layer = folium.GeoJson(
        gdf.to_json(),
        name=name,
        style_function=lambda feature: dict(PLATE_STYLE),
    )

    log.info("Built %r layer with %d boundary features", name, len(gdf))
    return layer
