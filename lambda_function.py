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
Lambda function handler for the Met Office Decide Alexa Skill.

This module contains the ASK SDK request handlers that hand each turn to
the dialog resolver and turn its directive into an Alexa response.
"""

import json
import logging
import traceback

from ask_sdk_core.dispatch_components import AbstractRequestHandler, AbstractExceptionHandler
from ask_sdk_core.dispatch_components import AbstractRequestInterceptor, AbstractResponseInterceptor
from ask_sdk_core.serialize import DefaultSerializer
from ask_sdk_core.skill_builder import SkillBuilder
from ask_sdk_core.utils import is_request_type
from ask_sdk_model import RequestEnvelope
from ask_sdk_model.ui import PlainTextOutputSpeech, Reprompt, SimpleCard

from dialog import prompts
from dialog.errors import InvalidApplication, MalformedRequest, ProtocolFault
from dialog.models import TurnDirective
from dialog.resolver import resolve_turn
from utils.config import Config
from utils.notify import notify

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

VERSION = 1
REVISION = 0

Config.validate()


def build_event(handler_input):
    """
    Build a minimal event dict from handler_input for notifications
    """
    request_envelope = handler_input.request_envelope
    request = request_envelope.request
    session = request_envelope.session

    event = {
        "session": {
            "sessionId": session.session_id if session else None,
            "user": {
                "userId": session.user.user_id if session and session.user else None
            }
        },
        "request": {
            "type": request.object_type,
            "requestId": request.request_id
        }
    }

    intent = getattr(request, "intent", None)
    if intent is not None:
        event["request"]["intent"] = {
            "name": intent.name,
            "slots": {}
        }
        if intent.slots:
            for slot_name, slot in intent.slots.items():
                event["request"]["intent"]["slots"][slot_name] = {
                    "name": slot.name,
                    "value": slot.value
                }

    return event


def respond(handler_input, directive):
    """
    Turn a directive into the Alexa response and save the session state
    """
    if handler_input.request_envelope.session is not None:
        handler_input.attributes_manager.session_attributes = directive.session

    response_builder = handler_input.response_builder
    response_builder.set_card(SimpleCard(title=directive.title, content=directive.speech))
    response_builder.set_should_end_session(directive.should_end_session)

    response = response_builder.response
    response.output_speech = PlainTextOutputSpeech(text=directive.speech)
    if directive.reprompt and not directive.should_end_session:
        response.reprompt = Reprompt(output_speech=PlainTextOutputSpeech(text=directive.reprompt))

    return response


# ============================================================================
# ASK SDK Request Handlers
# ============================================================================

class BaseIntentHandler(AbstractRequestHandler):
    """Base handler providing common functionality for all handlers"""

    def get_slot_values(self, handler_input):
        """Extract slot values from the intent"""
        slots = {}
        request = handler_input.request_envelope.request
        intent = getattr(request, "intent", None)
        if intent is not None and intent.slots:
            for slot_name, slot in intent.slots.items():
                slots[slot_name] = slot.value.strip() if slot.value else None
                logger.info("SLOT: %s = %s", slot_name, slots[slot_name])
        return slots

    def get_session_state(self, handler_input):
        """Snapshot of the session attributes"""
        if handler_input.request_envelope.session is None:
            return {}
        return dict(handler_input.attributes_manager.session_attributes or {})


class LaunchRequestHandler(BaseIntentHandler):
    """Handler for Skill Launch"""

    def can_handle(self, handler_input):
        return is_request_type("LaunchRequest")(handler_input)

    def handle(self, handler_input):
        directive = TurnDirective(prompts.WELCOME, prompts.WELCOME_REPROMPT, False, {},
                                  prompts.SKILL_NAME)
        return respond(handler_input, directive)


class SessionEndedRequestHandler(BaseIntentHandler):
    """Handler for Session End"""

    def can_handle(self, handler_input):
        return is_request_type("SessionEndedRequest")(handler_input)

    def handle(self, handler_input):
        request = handler_input.request_envelope.request
        event = build_event(handler_input)

        error = getattr(request, "error", None)
        if error is not None:
            notify(event, "Error detected", error.message)

        reason = getattr(request, "reason", None)
        if reason is not None:
            logger.info("Session ended: %s", reason)

        return handler_input.response_builder.response


class UmbrellaIntentHandler(BaseIntentHandler):
    """
    Handler for all intent requests.  The dialog resolver decides which
    intents are recognized.
    """

    def can_handle(self, handler_input):
        return is_request_type("IntentRequest")(handler_input)

    def handle(self, handler_input):
        intent = getattr(handler_input.request_envelope.request, "intent", None)
        if intent is None or not intent.name:
            raise MalformedRequest("IntentRequest has no intent name")

        directive = resolve_turn(intent.name,
                                 self.get_slot_values(handler_input),
                                 self.get_session_state(handler_input),
                                 build_event(handler_input))
        return respond(handler_input, directive)


class UnhandledRequestHandler(BaseIntentHandler):
    """
    Handler for request types the skill doesn't support.  Registered last.
    """

    def can_handle(self, handler_input):
        return True

    def handle(self, handler_input):
        request_type = handler_input.request_envelope.request.object_type
        raise MalformedRequest("Unsupported request type %s" % request_type)


# ============================================================================
# Request and Response Interceptors
# ============================================================================

class ApplicationIdVerifier(AbstractRequestInterceptor):
    """Reject requests meant for another skill, when an app id is configured."""

    def process(self, handler_input):
        if not Config.APP_ID:
            return

        request_envelope = handler_input.request_envelope
        application_id = None
        if request_envelope.session is not None and request_envelope.session.application is not None:
            application_id = request_envelope.session.application.application_id
        elif request_envelope.context is not None and request_envelope.context.system is not None:
            application_id = request_envelope.context.system.application.application_id

        if application_id != Config.APP_ID:
            raise InvalidApplication("Invoked from unknown application %s" % application_id)


class RequestLogger(AbstractRequestInterceptor):
    """Log the request envelope."""

    def process(self, handler_input):
        request_envelope = handler_input.request_envelope
        session = request_envelope.session
        if session is not None and session.new:
            logger.info("Session started: requestId: %s, sessionId: %s",
                        request_envelope.request.request_id, session.session_id)
        logger.info("Request Envelope: %s", request_envelope)


class ResponseLogger(AbstractResponseInterceptor):
    """Log the response envelope."""

    def process(self, handler_input, response):
        logger.info("Response: %s", response)


# ============================================================================
# Exception Handler
# ============================================================================

class AllExceptionHandler(AbstractExceptionHandler):
    """
    Catch all exception handler.  Protocol faults are left for the host.
    """

    def can_handle(self, handler_input, exception):
        return not isinstance(exception, ProtocolFault)

    def handle(self, handler_input, exception):
        logger.error("Exception encountered: %s", exception)
        notify(build_event(handler_input), "Exception", traceback.format_exc())

        directive = TurnDirective(prompts.UNAVAILABLE, "", True, {})
        return respond(handler_input, directive)


# ============================================================================
# Skill Builder
# ============================================================================

sb = SkillBuilder()

# Register request handlers
sb.add_request_handler(LaunchRequestHandler())
sb.add_request_handler(SessionEndedRequestHandler())
sb.add_request_handler(UmbrellaIntentHandler())
sb.add_request_handler(UnhandledRequestHandler())

# Register exception handler
sb.add_exception_handler(AllExceptionHandler())

# Register request and response interceptors
sb.add_global_request_interceptor(ApplicationIdVerifier())
sb.add_global_request_interceptor(RequestLogger())
sb.add_global_response_interceptor(ResponseLogger())

# Create the skill instance
skill_instance = sb.create()


# ============================================================================
# Lambda Handler
# ============================================================================

def lambda_handler(event, context=None):
    """
    Lambda handler for Alexa skill using ASK SDK.

    Raises:
        ProtocolFault: If the request doesn't fit the interaction model
    """
    request = event.get("request") if isinstance(event, dict) else None
    if not isinstance(request, dict) or not request.get("type"):
        notify(event if isinstance(event, dict) else {}, "Malformed request", json.dumps(event, default=str))
        raise MalformedRequest("Request envelope has no request type")

    serializer = DefaultSerializer()
    request_envelope = serializer.deserialize(json.dumps(event), RequestEnvelope)

    try:
        response_envelope = skill_instance.invoke(request_envelope, context)
    except ProtocolFault:
        logger.error("Lambda handler protocol fault: %s", traceback.format_exc())
        notify(event, "Protocol fault", traceback.format_exc())
        raise

    return serializer.serialize(response_envelope)
