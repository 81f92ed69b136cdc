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
Exceptions raised while handling a skill request.

ServiceUnavailable is recovered by the dialog resolver and turned into an
apology.  ProtocolFault and its subclasses describe requests the skill
cannot make sense of and are surfaced to the host as a failed invocation.
"""


class SkillError(Exception):
    """Base class for all skill errors."""


class ServiceUnavailable(SkillError):
    """An external service (geocoder or forecast) could not be used."""

    def __init__(self, service, message=None):
        self.service = service
        super().__init__("%s unavailable%s" % (service, ": %s" % message if message else ""))


class ProtocolFault(SkillError):
    """The request envelope does not match the interaction model."""


class InvalidIntent(ProtocolFault):
    """The intent name is not handled by this skill."""

    def __init__(self, intent_name):
        self.intent_name = intent_name
        super().__init__("Invalid intent: %s" % intent_name)


class MalformedRequest(ProtocolFault):
    """A required field is missing from the request envelope."""


class InvalidApplication(ProtocolFault):
    """The request was sent on behalf of another application."""


class ForecastOutOfRange(SkillError):
    """The requested day is outside the days the forecast covers."""

    def __init__(self, when):
        self.when = when
        super().__init__("No forecast for %s" % when)
