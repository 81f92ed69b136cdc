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
Decisions based on the weather forecast.
"""

import logging

from dialog.models import ResolvedDate, ResolvedLocation
from utils.constants import RAIN_THRESHOLD
from weather.forecast import Forecast

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

TAKE_UMBRELLA = "Take an umbrella"
NO_UMBRELLA = "Don't take an umbrella"


def umbrella_decision(rain_prob: float) -> str:
    """
    Decide about the umbrella from the chance of rain (0.0 - 1.0).
    """
    return TAKE_UMBRELLA if rain_prob > RAIN_THRESHOLD else NO_UMBRELLA


class WeatherDecisionService(object):
    """Looks up the forecast and applies the umbrella rule."""

    def __init__(self, forecast: Forecast) -> None:
        self.forecast = forecast

    def decide(self, location: ResolvedLocation, when: ResolvedDate) -> str:
        """
        Return the umbrella decision for the location and day.

        Raises:
            ServiceUnavailable: If the forecast lookup fails
        """
        rain_prob = self.forecast.rain_probability(location, when)
        decision = umbrella_decision(rain_prob)
        logger.info("DECISION: %s on %s, rain %.2f -> %s",
                    location.name, when.date, rain_prob, decision)
        return decision
