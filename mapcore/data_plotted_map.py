# mapcore/data_plotted_map.py
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import folium
import requests


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from core.map import MapConfig, create_map_view
from core.paths import output_path
from data_pipeline.geojson_normalization import parse_earthquakes
from data_pipeline.usgs_feed_fetch import (
    PLATE_BOUNDARIES_URL,
    FeedError,
    FetchConfig,
    _make_session,
    fetch_geojson,
)
from mapcore.legend import add_legend
from mapcore.quake_layers import (
    EARTHQUAKES_LAYER,
    PLATES_LAYER,
    build_earthquake_layer,
    build_plates_layer,
)

log = logging.getLogger(__name__)

Fetch = Callable[[str], Dict[str, Any]]


@dataclass(frozen=True)
class BasemapReady:
    m: folium.Map
    base_layers: Dict[str, folium.TileLayer]
    cfg: MapConfig


@dataclass(frozen=True)
class SeismicReady:
    basemap: BasemapReady
    earthquakes: folium.FeatureGroup
    legend: folium.Element
    quake_count: int


@dataclass(frozen=True)
class PlatesReady:
    seismic: SeismicReady
    plates: folium.GeoJson


@dataclass(frozen=True)
class LayerRegistry:
    base_layers: Mapping[str, Any]
    overlays: Mapping[str, Any]

    @classmethod
    def from_stages(cls, plates: PlatesReady) -> "LayerRegistry":
        seismic = plates.seismic
        return cls(
            base_layers=dict(seismic.basemap.base_layers),
            overlays={
                EARTHQUAKES_LAYER: seismic.earthquakes,
                PLATES_LAYER: plates.plates,
            },
        )


def make_fetcher(session: requests.Session, cfg: FetchConfig) -> Fetch:
    def _fetch(url: str) -> Dict[str, Any]:
        return fetch_geojson(url, session=session, cfg=cfg)

    return _fetch


def init_basemap(cfg: Optional[MapConfig] = None) -> BasemapReady:
    cfg = cfg or MapConfig()
    m, base_layers = create_map_view(cfg)
    log.info("Basemap ready: center=%s zoom=%d base_layers=%s", cfg.center, cfg.zoom, list(base_layers))
    return BasemapReady(m=m, base_layers=base_layers, cfg=cfg)


def load_seismic(basemap: BasemapReady, fetch: Fetch, url: str) -> SeismicReady:
    data = fetch(url)
    quakes = parse_earthquakes(data)

    layer = build_earthquake_layer(quakes, name=EARTHQUAKES_LAYER)
    layer.add_to(basemap.m)
    legend = add_legend(basemap.m, position=basemap.cfg.legend_position)

    return SeismicReady(basemap=basemap, earthquakes=layer, legend=legend, quake_count=len(quakes))


def load_plates(seismic: SeismicReady, fetch: Fetch, url: str = PLATE_BOUNDARIES_URL) -> PlatesReady:
    data = fetch(url)

    layer = build_plates_layer(data, name=PLATES_LAYER)
    layer.add_to(seismic.basemap.m)

    return PlatesReady(seismic=seismic, plates=layer)


def compose_layer_control(plates: PlatesReady, collapsed: bool = True) -> folium.LayerControl:
    """
    Add the single base/overlay toggle control. Every layer in the registry
    must already be a child of the map.
    """
    m = plates.seismic.basemap.m
    registry = LayerRegistry.from_stages(plates)

    # branca keys a parent's _children by get_name(); folium has no public lookup
    for name, layer in {**registry.base_layers, **registry.overlays}.items():
        if layer.get_name() not in m._children:
            raise ValueError(f"Layer {name!r} is not attached to the map")

    control = folium.LayerControl(collapsed=collapsed)
    control.add_to(m)
    log.info(
        "Layer control attached: base=%s overlays=%s",
        list(registry.base_layers),
        list(registry.overlays),
    )
    return control


def build_map(
    cfg: Optional[MapConfig] = None,
    *,
    fetch_cfg: Optional[FetchConfig] = None,
    fetch: Optional[Fetch] = None,
) -> folium.Map:
    """
    basemap -> seismic overlay + legend -> plate overlay -> layer control.
    A failed fetch stops the pipeline there and the partial map is returned.
    """
    fetch_cfg = fetch_cfg or FetchConfig()
    if fetch is not None:
        return _run_stages(cfg, fetch, fetch_cfg)

    with _make_session(fetch_cfg) as session:
        return _run_stages(cfg, make_fetcher(session, fetch_cfg), fetch_cfg)


def _run_stages(cfg: Optional[MapConfig], fetch: Fetch, fetch_cfg: FetchConfig) -> folium.Map:
    basemap = init_basemap(cfg)

    try:
        seismic = load_seismic(basemap, fetch, fetch_cfg.seismic_url())
    except FeedError as exc:
        log.error("Seismic stage failed, map has base layers only: %s", exc)
        return basemap.m

    try:
        plates = load_plates(seismic, fetch)
    except FeedError as exc:
        log.error("Plate stage failed, no layer control attached: %s", exc)
        return basemap.m

    compose_layer_control(plates, collapsed=basemap.cfg.collapsed_control)
    return basemap.m


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    m = build_map()

    out = output_path()
    m.save(str(out))
    print("Saved:", out)


if __name__ == "__main__":
    main()
