#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

import logging

import httpx

from utils.config import Config
from utils.geolocator import Geolocator
from weather.decision import WeatherDecisionService
from weather.forecast import Forecast

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# =============================================================================
# Factory Functions for Singleton Instances
# =============================================================================

_https_client = None


def get_https_client() -> httpx.Client:
    """
    Get or create the global HTTPS client instance.

    Returns:
        httpx.Client: Configured HTTP client for API calls
    """
    global _https_client
    if _https_client is None:
        _https_client = httpx.Client(timeout=Config.HTTP_TIMEOUT, follow_redirects=True)
    return _https_client


_geolocator_instance = None


def get_geolocator() -> Geolocator:
    """
    Get or create the global geolocator instance.

    Returns:
        Geolocator: Configured geolocator for geocoding operations
    """
    global _geolocator_instance
    if _geolocator_instance is None:
        _geolocator_instance = Geolocator(
            base_url=Config.GEOCODER_URL,
            user_agent=Config.USER_AGENT,
            session=get_https_client(),
            timeout=Config.HTTP_TIMEOUT,
            cache_size=Config.GEOCODE_CACHE_SIZE,
            cache_ttl=Config.GEOCODE_CACHE_TTL,
        )
    return _geolocator_instance


_decision_service_instance = None


def get_decision_service() -> WeatherDecisionService:
    """
    Get or create the global weather decision service instance.

    Returns:
        WeatherDecisionService: Service backed by the forecast API
    """
    global _decision_service_instance
    if _decision_service_instance is None:
        _decision_service_instance = WeatherDecisionService(
            Forecast(session=get_https_client(), url=Config.FORECAST_URL)
        )
    return _decision_service_instance
