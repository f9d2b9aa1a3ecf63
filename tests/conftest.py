"""
Shared fixtures: small in-memory GeoJSON feeds and a fake fetcher so the
pipeline runs without network access.
"""

import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from data_pipeline.usgs_feed_fetch import PLATE_BOUNDARIES_URL, SEISMIC_FEED_URL, FeedError


def quake_feature(mag, depth, place, lon=-118.2, lat=34.05, event_id="ci0001"):
    return {
        "type": "Feature",
        "id": event_id,
        "properties": {"mag": mag, "place": place},
        "geometry": {"type": "Point", "coordinates": [lon, lat, depth]},
    }


@pytest.fixture
def make_quake():
    """Factory fixture: one USGS-style point feature."""
    return quake_feature


@pytest.fixture
def seismic_collection():
    return {
        "type": "FeatureCollection",
        "features": [
            quake_feature(4.5, 45, "10km N of Testville", event_id="us1"),
            quake_feature(0, 3.2, "2km W of Nowhere", lon=-150.1, lat=61.2, event_id="ak2"),
            quake_feature(6.1, 120.0, "Deep Trench Region", lon=142.3, lat=38.3, event_id="us3"),
        ],
    }


@pytest.fixture
def plates_collection():
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"Name": "AF-AN", "PlateA": "AF", "PlateB": "AN"},
                "geometry": {"type": "LineString", "coordinates": [[-0.4, -54.8], [0.0, -54.9], [1.2, -55.1]]},
            },
            {
                "type": "Feature",
                "properties": {"Name": "NA-PA", "PlateA": "NA", "PlateB": "PA"},
                "geometry": {"type": "LineString", "coordinates": [[-122.5, 37.7], [-121.9, 36.9]]},
            },
        ],
    }


@pytest.fixture
def make_fetch(seismic_collection, plates_collection):
    """Factory fixture: a fetch callable serving the fixture feeds, with optional failing URLs."""
    def _make(fail=()):
        calls = []
        feeds = {SEISMIC_FEED_URL: seismic_collection, PLATE_BOUNDARIES_URL: plates_collection}

        def _fetch(url):
            calls.append(url)
            if url in fail:
                raise FeedError(f"Request failed: {url}")
            return feeds[url]

        _fetch.calls = calls
        return _fetch
    return _make
