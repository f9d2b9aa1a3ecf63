# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

import requests

log = logging.getLogger(__name__)

_FEED_BASE = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"

SEISMIC_FEEDS = {
    "hour": f"{_FEED_BASE}/all_hour.geojson",
    "day": f"{_FEED_BASE}/all_day.geojson",
    "week": f"{_FEED_BASE}/all_week.geojson",
    "month": f"{_FEED_BASE}/all_month.geojson",
}

SEISMIC_FEED_URL = SEISMIC_FEEDS["week"]
PLATE_BOUNDARIES_URL = (
    "https://raw.githubusercontent.com/fraxen/tectonicplates/master/GeoJSON/PB2002_boundaries.json"
)


class FeedError(RuntimeError):
    """A GeoJSON feed could not be fetched or decoded."""


@dataclass(frozen=True)
class FetchConfig:
    timeout_s: int = 15
    user_agent: str = "quakemap-feed-fetcher/0.1"
    seismic_period: str = "week"  # hour | day | week | month

    def seismic_url(self) -> str:
        try:
            return SEISMIC_FEEDS[self.seismic_period]
        except KeyError:
            raise ValueError(
                f"Unknown seismic feed period {self.seismic_period!r}, expected one of {sorted(SEISMIC_FEEDS)}"
            ) from None


def _make_session(cfg: FetchConfig) -> requests.Session:
    session = requests.Session()
    # requests.Session already carries a python-requests User-Agent
    session.headers["User-Agent"] = cfg.user_agent
    return session


def fetch_geojson(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    cfg: Optional[FetchConfig] = None,
) -> Dict[str, Any]:
    """
    GET a GeoJSON document and return it parsed.
    Raises FeedError on transport errors, HTTP errors, bad JSON, or a non-object payload.
    """
    cfg = cfg or FetchConfig()
    session = session or _make_session(cfg)

    try:
        resp = session.get(url, timeout=cfg.timeout_s)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as exc:
        log.error("Request failed url=%s err=%s", url, exc)
        raise FeedError(f"Request failed: {url}") from exc
    except ValueError as exc:
        log.error("JSON decode failed url=%s err=%s", url, exc)
        raise FeedError(f"Invalid JSON from {url}") from exc

    if not isinstance(data, dict):
        raise FeedError(f"Expected a GeoJSON object from {url}, got {type(data).__name__}")

    log.info("Fetched %s (%d features)", url, len(data.get("features") or []))
    return data
