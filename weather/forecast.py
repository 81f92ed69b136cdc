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
Forecast class for retrieving the chance of rain.

This module queries the Open-Meteo daily forecast for the maximum
precipitation probability on a given day.
"""

import logging
from datetime import date, timedelta
from typing import Optional

import httpx

from dialog.dates import today
from dialog.errors import ForecastOutOfRange, ServiceUnavailable
from dialog.models import ResolvedDate, ResolvedLocation
from utils.config import Config
from utils.constants import FORECAST_DAYS
from weather.base import WeatherBase

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class Forecast(WeatherBase):
    """
    Retrieves daily precipitation forecasts.

    Probabilities are returned on a 0.0 to 1.0 scale.
    """

    def __init__(self, session: Optional[httpx.Client] = None,
                 url: Optional[str] = None) -> None:
        super().__init__(session)
        self.url = url or Config.FORECAST_URL

    def covers(self, when: ResolvedDate, base: Optional[date] = None) -> bool:
        """
        Return True if the forecast has a value for the given day.
        """
        first = base or today()
        last = first + timedelta(days=FORECAST_DAYS - 1)
        return first <= date.fromisoformat(when.date) <= last

    def rain_probability(self, location: ResolvedLocation, when: ResolvedDate) -> float:
        """
        Return the chance of rain at the location on the given day.

        Args:
            location: Where
            when: Which day

        Returns:
            Probability between 0.0 and 1.0

        Raises:
            ForecastOutOfRange: If the day is before today or too far ahead
            ServiceUnavailable: If the forecast can't be retrieved or has no value
                for the day
        """
        if not self.covers(when):
            logger.info("FORECAST: %s is outside the forecast range", when.date)
            raise ForecastOutOfRange(when.date)

        params = {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "daily": "precipitation_probability_max",
            "timezone": "auto",
            "start_date": when.date,
            "end_date": when.date,
        }
        logger.info("FORECAST: %s for %s (%s)", location.name, when.date, when.query_param)

        data = self.https(self.url, params)

        daily = data.get("daily") or {}
        values = daily.get("precipitation_probability_max") or []
        if len(values) == 0 or values[0] is None:
            logger.error("Forecast missing precipitation: %s", data)
            raise ServiceUnavailable("forecast", "no precipitation probability for %s" % when.date)

        try:
            percent = float(values[0])
        except (TypeError, ValueError):
            logger.error("Forecast precipitation not numeric: %s", data)
            raise ServiceUnavailable("forecast", "invalid precipitation probability")

        return min(max(percent / 100.0, 0.0), 1.0)
