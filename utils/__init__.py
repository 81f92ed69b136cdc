"""
Utility modules for Met Office Decide.

This package contains configuration, constants, the geolocator and
helper functions.
"""

from .constants import (DATE_RANGE_HOURS, DAYS, FORECAST_DAYS, MONTH_DAYS, MONTH_NAMES,
                        ONESHOT_CITY_SLOTS, RAIN_THRESHOLD, SLOTS,
                        SUPPORTED_CITIES)
from .geolocator import Geolocator

__all__ = ['Geolocator', 'DATE_RANGE_HOURS', 'DAYS', 'FORECAST_DAYS', 'MONTH_DAYS',
           'MONTH_NAMES', 'ONESHOT_CITY_SLOTS', 'RAIN_THRESHOLD', 'SLOTS',
           'SUPPORTED_CITIES']
