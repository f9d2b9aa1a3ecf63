"""
Earthquake markers and the plate boundary layer.
"""

import folium

from data_pipeline.geojson_normalization import Earthquake, parse_earthquakes
from mapcore.quake_layers import (
    build_earthquake_layer,
    build_plates_layer,
    popup_text,
    quake_marker,
)


def _quake(mag=4.5, depth=45.0, place="10km N of Testville"):
    return Earthquake(event_id="us1", lat=34.05, lon=-118.2, depth_km=depth, mag=mag, place=place)


class TestQuakeMarker:

    def test_testville_event(self):
        mk = quake_marker(_quake())
        assert mk.style["fill_color"] == "#eecc00"
        assert mk.style["radius"] == 18
        assert mk.popup == "Magnitude: 4.5<br>Location: 10km N of Testville"

    def test_location_is_lat_lon(self):
        assert quake_marker(_quake()).location == (34.05, -118.2)

    def test_integral_magnitude_has_no_trailing_zero(self):
        assert popup_text(_quake(mag=5.0, place="X")) == "Magnitude: 5<br>Location: X"

    def test_zero_magnitude_marker_is_visible(self):
        assert quake_marker(_quake(mag=0.0)).style["radius"] == 1


class TestEarthquakeLayer:

    def test_one_marker_per_event(self, seismic_collection):
        quakes = parse_earthquakes(seismic_collection)
        layer = build_earthquake_layer(quakes)

        assert isinstance(layer, folium.FeatureGroup)
        assert layer.layer_name == "Earthquakes"
        markers = list(layer._children.values())
        assert len(markers) == 3
        assert all(isinstance(mk, folium.CircleMarker) for mk in markers)

    def test_empty_feed_gives_empty_layer(self):
        layer = build_earthquake_layer([])
        assert len(layer._children) == 0


class TestPlatesLayer:

    def test_uniform_orange_lines(self, plates_collection):
        layer = build_plates_layer(plates_collection)

        assert layer.layer_name == "Tectonic Plates"
        feats = layer.data["features"]
        assert len(feats) == 2
        for feat in feats:
            assert layer.style_function(feat) == {"color": "orange", "weight": 2}

    def test_keeps_boundary_properties(self, plates_collection):
        layer = build_plates_layer(plates_collection)
        names = sorted(f["properties"]["Name"] for f in layer.data["features"])
        assert names == ["AF-AN", "NA-PA"]
