"""
Weather modules for Met Office Decide.

This package contains the forecast lookup and the decisions made from it.
"""

from weather.base import WeatherBase
from weather.decision import WeatherDecisionService, umbrella_decision
from weather.forecast import Forecast

__all__ = [
    'WeatherBase',
    'Forecast',
    'WeatherDecisionService', 'umbrella_decision',
]
