# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List
import logging

import geopandas as gpd

from data_pipeline.usgs_feed_fetch import FeedError

log = logging.getLogger(__name__)

WGS84 = "EPSG:4326"


@dataclass(frozen=True)
class Earthquake:
    """One seismic event from the USGS summary feed."""
    event_id: str
    lat: float
    lon: float
    depth_km: float
    mag: float
    place: str


def _features(collection: Dict[str, Any]) -> List[Dict[str, Any]]:
    feats = collection.get("features")
    if not isinstance(feats, list):
        raise FeedError(f"GeoJSON collection has no 'features' list (got {type(feats).__name__})")
    return feats


def parse_earthquake(feature: Dict[str, Any]) -> Earthquake:
    # GeoJSON order is lon, lat, depth
    props = feature["properties"]
    coords = feature["geometry"]["coordinates"]
    return Earthquake(
        event_id=str(feature.get("id") or ""),
        lat=float(coords[1]),
        lon=float(coords[0]),
        depth_km=float(coords[2]),
        mag=float(props["mag"]),
        place=str(props.get("place") or "Unknown location"),
    )


def parse_earthquakes(collection: Dict[str, Any]) -> List[Earthquake]:
    feats = _features(collection)
    out: List[Earthquake] = []
    for i, feat in enumerate(feats):
        try:
            out.append(parse_earthquake(feat))
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            log.warning("Skipping malformed seismic feature #%d id=%r err=%r", i, _feature_id(feat), exc)
            continue

    log.info("Parsed %d earthquakes (%d skipped)", len(out), len(feats) - len(out))
    return out


def _feature_id(feat: Any) -> Any:
    return feat.get("id") if isinstance(feat, dict) else None


def plates_to_gdf(collection: Dict[str, Any]) -> gpd.GeoDataFrame:
    """
    Load plate boundary line features into a GeoDataFrame in EPSG:4326.
    """
    feats = _features(collection)
    if not feats:
        return gpd.GeoDataFrame({"geometry": []}, geometry="geometry", crs=WGS84)

    gdf = gpd.GeoDataFrame.from_features(feats, crs=WGS84)
    return gdf.to_crs(epsg=4326)
