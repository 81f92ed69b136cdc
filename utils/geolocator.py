#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

"""
Geolocator class for converting city names to coordinates.
Uses the OpenStreetMap Nominatim search API.
"""

import logging
from typing import Optional

import httpx
from cachetools import TTLCache

from dialog.errors import ServiceUnavailable
from dialog.models import ResolvedLocation

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class Geolocator:
    """
    Abstraction layer for geocoding services.
    Currently supports the OpenStreetMap Nominatim API.

    Successful lookups are remembered, so asking for the same city twice
    gives the same location without another request.
    """

    def __init__(self, base_url, user_agent, session=None, timeout=10,
                 cache_size=100, cache_ttl=3600):
        """
        Initialize the geolocator.

        Args:
            base_url: Nominatim search endpoint
            user_agent: User agent required by the Nominatim usage policy
            session: Optional httpx.Client to use for HTTP requests
            timeout: Request timeout in seconds
            cache_size: Maximum number of remembered lookups
            cache_ttl: Seconds a lookup is remembered
        """
        self.base_url = base_url
        self.user_agent = user_agent
        self.session = session or httpx.Client(timeout=timeout, follow_redirects=True)
        self.timeout = timeout
        self.cache = TTLCache(maxsize=cache_size, ttl=cache_ttl)

    def geocode(self, search: Optional[str]) -> Optional[ResolvedLocation]:
        """
        Geocode a city name.

        Args:
            search: Free text place name (e.g., "Seattle", "Exeter Devon")

        Returns:
            ResolvedLocation of the best match, or None if nothing matched

        Raises:
            ServiceUnavailable: If the geocoding service can't be reached
                or returns an error
        """
        if search is None:
            return None

        # Clean up the search query
        query = " ".join(search.replace("+", " ").split())
        if not query:
            return None

        key = query.lower()
        if key in self.cache:
            return self.cache[key]

        params = {
            "q": query,
            "format": "json",
            "polygon": 0,
            "addressdetails": 1,
            "limit": 1,
        }

        try:
            response = self.session.get(
                self.base_url,
                params=params,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout
            )
        except httpx.HTTPError as e:
            logger.error("Geocoding error: %s", e)
            raise ServiceUnavailable("geocoder", str(e))

        if response.status_code != 200:
            logger.error("Geocoding status %s for %r", response.status_code, query)
            raise ServiceUnavailable("geocoder", "HTTP status %s" % response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ServiceUnavailable("geocoder", "invalid JSON: %s" % e)

        # First result wins
        if not isinstance(data, list) or len(data) == 0:
            logger.info("GEOCODE: no match for %r", query)
            return None

        item = data[0]
        try:
            latitude = float(item["lat"])
            longitude = float(item["lon"])
        except (KeyError, TypeError, ValueError):
            logger.info("GEOCODE: match for %r has no position", query)
            return None

        name = item.get("display_name") or query
        name = name.split(",")[0].strip() or query

        location = ResolvedLocation(name=name, latitude=latitude, longitude=longitude)
        self.cache[key] = location
        logger.info("GEOCODE: %r -> %s", query, location)

        return location
