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
Dialog turn resolution.

Each turn receives the intent name, the slot values and the session state
remembered from earlier turns.  It returns what to say and the session
state for the next turn.  The final answer is only given once both the
city and the date are known; otherwise the user is asked for whichever
one is missing.

Two models are supported:

One-shot:
    User:  "Alexa, ask Met Office Decide if I need an umbrella in Seattle"
    Alexa: "Today in Seattle, don't take an umbrella."

Dialog:
    User:  "Alexa, open Met Office Decide"
    Alexa: "Welcome to Met Office Decide. Which city would you like..."
    User:  "Seattle"
    Alexa: "For which date would you like to know about Seattle?"
    User:  "this Saturday"
    Alexa: "Saturday June twentieth in Seattle, take an umbrella."
"""

import logging
from typing import Any, Dict, Optional

from dialog import prompts
from dialog.dates import resolve_date
from dialog.errors import ForecastOutOfRange, InvalidIntent, ServiceUnavailable
from dialog.models import (ResolvedDate, ResolvedLocation, TurnDirective,
                           get_city, get_date, with_city, with_date,
                           without_date)
from utils import factories
from utils.constants import ONESHOT_CITY_SLOTS
from utils.notify import notify

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def slot_value(slots: Optional[Dict[str, Optional[str]]], name: str) -> Optional[str]:
    """Return the stripped slot value, or None if absent or empty."""
    if not slots:
        return None
    value = slots.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


class DialogTurnResolver(object):
    """
    Decides what to say for a turn.

    Args:
        geolocator: Object with geocode(name) -> ResolvedLocation or None
        decision_service: Object with decide(location, date) -> str
        event: Request event, only used for notifications
    """

    def __init__(self, geolocator, decision_service, event=None):
        self.geolocator = geolocator
        self.decision_service = decision_service
        self.event = event or {}

    def resolve(self, intent_name: str, slots: Optional[Dict[str, Optional[str]]],
                session: Optional[Dict[str, Any]]) -> TurnDirective:
        """
        Resolve one turn.

        Raises:
            InvalidIntent: If the intent isn't handled by this skill
            MalformedRequest: If the session state can't be understood
        """
        handler = INTENTS.get(intent_name, DialogTurnResolver.invalid_intent)
        session = dict(session or {})
        slots = slots or {}

        logger.info("INTENT: %s SLOTS: %s", intent_name, slots)

        try:
            return handler(self, intent_name, slots, session)
        except ServiceUnavailable as e:
            logger.error("Service unavailable: %s", e)
            notify(self.event, "Service unavailable", str(e))
            return TurnDirective(prompts.UNAVAILABLE, "", True, session)

    # -------------------------------------------------------------------------
    # Intents
    # -------------------------------------------------------------------------

    def invalid_intent(self, intent_name, slots, session):
        raise InvalidIntent(intent_name)

    def one_shot_umbrella_intent(self, intent_name, slots, session):
        """
        Handles a request that names the city (and maybe the date) in one go.
        A bad city is asked for again; a bad date switches to the dialog model.
        """
        city = None
        for name in ONESHOT_CITY_SLOTS:
            city = slot_value(slots, name)
            if city:
                break

        location = self.geolocator.geocode(city) if city else None
        if location is None:
            return TurnDirective(prompts.unknown_city(city),
                                 prompts.supported_cities(),
                                 False,
                                 session)

        when = resolve_date(slot_value(slots, "Date"))
        if when is None:
            return TurnDirective(prompts.UNKNOWN_DATE,
                                 prompts.DATE_REPROMPT,
                                 False,
                                 with_city(session, location))

        return self.answer(location, when, session)

    def dialog_umbrella_intent(self, intent_name, slots, session):
        """
        Handles one turn of the dialog model.  The city slot takes priority
        over the date slot.
        """
        city = slot_value(slots, "City")
        if city:
            return self.city_dialog(city, session)

        date = slot_value(slots, "Date")
        if date:
            return self.date_dialog(date, session)

        return self.no_slot_dialog(session)

    def help_intent(self, intent_name, slots, session):
        return TurnDirective(prompts.HELP, prompts.HELP_REPROMPT, False, session)

    def stop_intent(self, intent_name, slots, session):
        return TurnDirective(prompts.GOODBYE, "", True, session)

    def fallback_intent(self, intent_name, slots, session):
        return TurnDirective(prompts.FALLBACK, prompts.HELP_REPROMPT, False, session)

    # -------------------------------------------------------------------------
    # Dialog branches
    # -------------------------------------------------------------------------

    def city_dialog(self, city, session):
        location = self.geolocator.geocode(city)
        if location is None:
            return TurnDirective(prompts.UNKNOWN_CITY + " " + prompts.supported_cities(),
                                 prompts.supported_cities(),
                                 False,
                                 session)

        when = get_date(session)
        if when is not None:
            return self.answer(location, when, session)

        return TurnDirective(prompts.ask_date(location),
                             prompts.WHICH_DATE,
                             False,
                             with_city(session, location))

    def date_dialog(self, date, session):
        when = resolve_date(date)
        if when is None:
            return TurnDirective(prompts.UNKNOWN_DATE,
                                 prompts.DATE_REPROMPT,
                                 False,
                                 session)

        location = get_city(session)
        if location is not None:
            return self.answer(location, when, session)

        return TurnDirective(prompts.ask_city(when),
                             prompts.supported_cities(),
                             False,
                             with_date(session, when))

    def no_slot_dialog(self, session):
        if get_city(session) is not None:
            return TurnDirective(prompts.DATE_REPROMPT,
                                 prompts.DATE_REPROMPT,
                                 False,
                                 session)

        return TurnDirective(prompts.supported_cities(),
                             prompts.supported_cities(),
                             False,
                             session)

    def answer(self, location: ResolvedLocation, when: ResolvedDate, session) -> TurnDirective:
        try:
            decision = self.decision_service.decide(location, when)
        except ForecastOutOfRange:
            return TurnDirective(prompts.OUT_OF_RANGE,
                                 prompts.DATE_REPROMPT,
                                 False,
                                 with_city(without_date(session), location))

        text = prompts.answer(location, when, decision)
        return TurnDirective(text,
                             "",
                             True,
                             with_date(with_city(session, location), when),
                             prompts.ANSWER_TITLE)


# Intent name to handler
INTENTS = {
    "OneShotUmbrellaIntent": DialogTurnResolver.one_shot_umbrella_intent,
    "NeedUmbrella": DialogTurnResolver.one_shot_umbrella_intent,
    "DialogUmbrellaIntent": DialogTurnResolver.dialog_umbrella_intent,
    "HelpIntent": DialogTurnResolver.help_intent,
    "AMAZON.HelpIntent": DialogTurnResolver.help_intent,
    "AMAZON.StopIntent": DialogTurnResolver.stop_intent,
    "AMAZON.CancelIntent": DialogTurnResolver.stop_intent,
    "AMAZON.FallbackIntent": DialogTurnResolver.fallback_intent,
}


def resolve_turn(intent_name, slots, session, event=None) -> TurnDirective:
    """
    Resolve a turn using the configured geolocator and decision service.
    """
    resolver = DialogTurnResolver(factories.get_geolocator(),
                                  factories.get_decision_service(),
                                  event)
    return resolver.resolve(intent_name, slots, session)
