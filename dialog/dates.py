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
Date slot handling.

Alexa fills AMAZON.DATE slots with ISO 8601 text such as "2015-06-20" or
"2015-W25".  These are converted to a calendar date, a phrase suitable for
speech and the query fragment used for forecast requests.
"""

import logging
from datetime import date, datetime
from typing import Optional

from dateutil import parser, tz

from dialog.models import ResolvedDate
from utils.config import Config
from utils.constants import DATE_RANGE_HOURS, DAYS, MONTH_DAYS, MONTH_NAMES

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def today() -> date:
    """Return today's date in the configured time zone."""
    return datetime.now(tz=tz.gettz(Config.TIMEZONE)).date()


def query_param(when: date) -> str:
    """Return the forecast query fragment for the given date."""
    return "begin_date=%04d%02d%02d&range=%d" % (when.year, when.month, when.day, DATE_RANGE_HOURS)


def spoken_date(when: date) -> str:
    """
    Return the date as it should be spoken, like "Saturday June twentieth".
    """
    return "%s %s %s" % (DAYS[when.weekday()].capitalize(),
                         MONTH_NAMES[when.month - 1].capitalize(),
                         MONTH_DAYS[when.day - 1])


def parse_date(value: str, base: Optional[date] = None) -> Optional[date]:
    """
    Convert the slot text to a date.

    Args:
        value: Raw slot value
        base: Date used to fill in missing fields (default: today)

    Returns:
        The date, or None if the text can't be understood
    """
    value = value.strip()

    try:
        return parser.isoparse(value).date()
    except (ValueError, OverflowError):
        pass

    base = base or today()
    try:
        return parser.parse(value, default=datetime(base.year, base.month, base.day)).date()
    except (ValueError, OverflowError):
        logger.info("DATE: unable to parse %r", value)
        return None


def resolve_date(value: Optional[str], base: Optional[date] = None) -> Optional[ResolvedDate]:
    """
    Resolve a Date slot value.

    An absent or empty value means today.  Returns None only when a value
    was given and it could not be parsed.
    """
    base = base or today()

    if value is None or not value.strip():
        when = base
    else:
        when = parse_date(value, base)
        if when is None:
            return None

    display = "Today" if when == base else spoken_date(when)

    return ResolvedDate(display_text=display,
                        query_param=query_param(when),
                        date=when.isoformat())
