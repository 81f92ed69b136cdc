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
Base class for weather data operations.

This module provides the HTTP communication shared by the weather classes.
Failures are logged here and raised as ServiceUnavailable; the dialog
resolver sends the operator notification, the same as for geocoding.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from dialog.errors import ServiceUnavailable
from utils.config import Config

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class WeatherBase(object):
    """
    Base class for weather data operations.
    """

    def __init__(self, session: Optional[httpx.Client] = None) -> None:
        """
        Initialize the weather base class.

        Args:
            session: Optional httpx.Client used for requests
        """
        self.session = session or httpx.Client(timeout=Config.HTTP_TIMEOUT, follow_redirects=True)

    def https(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Retrieve the JSON data from the given URL.

        Args:
            url: API endpoint
            params: Query parameters

        Returns:
            Dict containing the JSON response

        Raises:
            ServiceUnavailable: If the request fails or the response is not usable
        """
        headers = {"User-Agent": Config.USER_AGENT,
                   "Accept": "application/json"}
        try:
            r = self.session.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            logger.error("HTTP error for %s: %s", url, e)
            raise ServiceUnavailable("forecast", str(e))

        if r.status_code != 200 or not r.text:
            logger.error("HTTPSTATUS: %s URL: %s\n\n%s", r.status_code, r.url, r.text)
            raise ServiceUnavailable("forecast", "HTTP status %s" % r.status_code)

        try:
            return r.json()
        except ValueError as e:
            logger.error("Invalid JSON from %s: %s", r.url, e)
            raise ServiceUnavailable("forecast", "invalid JSON")
