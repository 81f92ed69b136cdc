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
Values passed between the dialog resolver and its collaborators.

Session state is kept as a plain dict so the ASK SDK can hand it back to
Alexa as session attributes.  Every helper here returns a new dict and
leaves the one it was given untouched.
"""

from typing import Any, Dict, NamedTuple, Optional

from dialog.errors import MalformedRequest

SESSION_CITY = "city"
SESSION_DATE = "date"


class ResolvedLocation(NamedTuple):
    """A geocoded place."""
    name: str
    latitude: float
    longitude: float


class ResolvedDate(NamedTuple):
    """A calendar date with its spoken form and forecast query fragment."""
    display_text: str
    query_param: str
    date: str


class TurnDirective(NamedTuple):
    """What to say for one turn, and the session to carry into the next."""
    speech: str
    reprompt: str
    should_end_session: bool
    session: Dict[str, Any]
    title: str = "Met Office Decide"


def _load(session: Optional[Dict[str, Any]], key: str, cls):
    if not session:
        return None

    data = session.get(key)
    if not data:
        return None

    try:
        return cls(**data)
    except TypeError as e:
        raise MalformedRequest("Session attribute %s is malformed: %s" % (key, e))


def get_city(session: Optional[Dict[str, Any]]) -> Optional[ResolvedLocation]:
    """Return the city remembered in the session, if any."""
    return _load(session, SESSION_CITY, ResolvedLocation)


def get_date(session: Optional[Dict[str, Any]]) -> Optional[ResolvedDate]:
    """Return the date remembered in the session, if any."""
    return _load(session, SESSION_DATE, ResolvedDate)


def with_city(session: Optional[Dict[str, Any]], location: ResolvedLocation) -> Dict[str, Any]:
    """Return a copy of the session holding the given city."""
    state = dict(session or {})
    state[SESSION_CITY] = location._asdict()
    return state


def with_date(session: Optional[Dict[str, Any]], when: ResolvedDate) -> Dict[str, Any]:
    """Return a copy of the session holding the given date."""
    state = dict(session or {})
    state[SESSION_DATE] = when._asdict()
    return state


def without_date(session: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Return a copy of the session with no date."""
    state = dict(session or {})
    state.pop(SESSION_DATE, None)
    return state
