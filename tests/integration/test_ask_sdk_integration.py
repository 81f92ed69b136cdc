#!/usr/bin/env python3
"""
Test ASK SDK integration without requiring network access
"""
import os
import sys
from unittest.mock import Mock, patch

import pytest

# Set required environment variables
os.environ["SKILLTEST"] = "true"
os.environ["app_id"] = ""

# Add the root directory to the path
test_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.dirname(os.path.dirname(test_dir)))

from dialog import prompts  # noqa: E402
from dialog.errors import InvalidApplication, InvalidIntent, MalformedRequest, ServiceUnavailable  # noqa: E402
from dialog.models import ResolvedLocation  # noqa: E402
from lambda_function import lambda_handler  # noqa: E402
from utils.config import Config  # noqa: E402

APPLICATION_ID = "amzn1.ask.skill.test"
SEATTLE = ResolvedLocation("Seattle", 47.6038321, -122.330062)


def build_test_event(request_type, intent_name=None, slots=None, attributes=None):
    """Build a request envelope like the one Alexa sends"""
    event = {
        "version": "1.0",
        "session": {
            "new": not attributes,
            "sessionId": "amzn1.echo-api.session.test",
            "application": {
                "applicationId": APPLICATION_ID
            },
            "attributes": attributes or {},
            "user": {
                "userId": "amzn1.ask.account.test"
            }
        },
        "context": {
            "System": {
                "application": {
                    "applicationId": APPLICATION_ID
                },
                "user": {
                    "userId": "amzn1.ask.account.test"
                },
                "device": {
                    "deviceId": "amzn1.ask.device.test"
                },
                "apiEndpoint": "https://api.amazonalexa.com"
            }
        },
        "request": {
            "type": request_type,
            "requestId": "amzn1.echo-api.request.test",
            "timestamp": "2026-10-18T00:00:00Z",
            "locale": "en-GB"
        }
    }

    if intent_name is not None:
        event["request"]["intent"] = {
            "name": intent_name,
            "confirmationStatus": "NONE",
            "slots": {
                name: {"name": name, "value": value, "confirmationStatus": "NONE"}
                for name, value in (slots or {}).items()
            }
        }

    return event


def services(decision="Take an umbrella"):
    """Patch the factories with stand-ins for the geocoder and forecast"""
    geolocator = Mock()
    geolocator.geocode.side_effect = lambda city: SEATTLE if city == "Seattle" else None
    decision_service = Mock()
    decision_service.decide.return_value = decision

    geo_patch = patch("utils.factories.get_geolocator", return_value=geolocator)
    decision_patch = patch("utils.factories.get_decision_service", return_value=decision_service)
    return geo_patch, decision_patch, decision_service


def test_launch_request():
    """Test that LaunchRequest welcomes the user"""
    print("Testing LaunchRequest...")

    response = lambda_handler(build_test_event("LaunchRequest"), None)

    assert response["version"] == "1.0"
    speech = response["response"]["outputSpeech"]
    assert speech["type"] == "PlainText"
    assert speech["text"] == prompts.WELCOME
    assert response["response"]["reprompt"]["outputSpeech"]["text"] == prompts.WELCOME_REPROMPT
    assert response["response"]["shouldEndSession"] is False

    print("✓ LaunchRequest handler invoked successfully")


def test_dialog_turns():
    """Test the city then date dialog through the ASK SDK"""
    print("Testing dialog turns...")

    geo_patch, decision_patch, _ = services()
    with geo_patch, decision_patch:
        response = lambda_handler(
            build_test_event("IntentRequest", "DialogUmbrellaIntent", {"City": "Seattle", "Date": None}),
            None)

        assert response["response"]["outputSpeech"]["text"] == \
            "For which date would you like to know about Seattle?"
        assert response["response"]["shouldEndSession"] is False
        attributes = response["sessionAttributes"]
        assert attributes["city"]["name"] == "Seattle"

        response = lambda_handler(
            build_test_event("IntentRequest", "DialogUmbrellaIntent",
                             {"City": None, "Date": "2015-06-20"}, attributes),
            None)

    speech = response["response"]["outputSpeech"]["text"]
    assert speech == "Saturday June twentieth in Seattle, take an umbrella."
    assert response["response"]["shouldEndSession"] is True
    assert response["response"]["card"]["type"] == "Simple"
    assert response["response"]["card"]["title"] == prompts.ANSWER_TITLE
    assert response["response"]["card"]["content"] == speech
    assert "reprompt" not in response["response"]

    print("✓ Dialog answered after two turns")


def test_one_shot():
    """Test a one-shot question"""
    geo_patch, decision_patch, _ = services(decision="Don't take an umbrella")
    with geo_patch, decision_patch:
        response = lambda_handler(
            build_test_event("IntentRequest", "OneShotUmbrellaIntent", {"location": "Seattle"}),
            None)

    assert response["response"]["outputSpeech"]["text"] == "Today in Seattle, don't take an umbrella."
    assert response["response"]["shouldEndSession"] is True


def test_service_unavailable():
    """Test that a failing forecast is apologized for"""
    geo_patch, decision_patch, decision_service = services()
    decision_service.decide.side_effect = ServiceUnavailable("forecast")
    with geo_patch, decision_patch:
        response = lambda_handler(
            build_test_event("IntentRequest", "OneShotUmbrellaIntent", {"location": "Seattle"}),
            None)

    assert response["response"]["outputSpeech"]["text"] == prompts.UNAVAILABLE
    assert response["response"]["shouldEndSession"] is True


def test_unexpected_error_is_spoken():
    """Test that unexpected exceptions give a spoken apology"""
    geo_patch, decision_patch, decision_service = services()
    decision_service.decide.side_effect = RuntimeError("boom")
    with geo_patch, decision_patch:
        response = lambda_handler(
            build_test_event("IntentRequest", "OneShotUmbrellaIntent", {"location": "Seattle"}),
            None)

    assert response["response"]["outputSpeech"]["text"] == prompts.UNAVAILABLE
    assert response["response"]["shouldEndSession"] is True


def test_unknown_intent():
    """Test that an intent outside the interaction model is raised to the host"""
    geo_patch, decision_patch, _ = services()
    with geo_patch, decision_patch:
        with pytest.raises(InvalidIntent):
            lambda_handler(build_test_event("IntentRequest", "PizzaIntent"), None)


def test_missing_request():
    """Test that an envelope without a request is malformed"""
    event = build_test_event("LaunchRequest")
    del event["request"]

    with pytest.raises(MalformedRequest):
        lambda_handler(event, None)


def test_wrong_application():
    """Test that a request for another skill is rejected"""
    with patch.object(Config, "APP_ID", "amzn1.ask.skill.other"):
        with pytest.raises(InvalidApplication):
            lambda_handler(build_test_event("LaunchRequest"), None)

    with patch.object(Config, "APP_ID", APPLICATION_ID):
        response = lambda_handler(build_test_event("LaunchRequest"), None)
        assert response["response"]["outputSpeech"]["text"] == prompts.WELCOME


def test_unsupported_request_type():
    """Test that request types the skill doesn't support are raised to the host"""
    print("Testing unsupported request type...")

    event = build_test_event("CanFulfillIntentRequest", "OneShotUmbrellaIntent", {"location": "Seattle"})

    geo_patch, decision_patch, decision_service = services()
    with geo_patch, decision_patch:
        with pytest.raises(MalformedRequest):
            lambda_handler(event, None)
    decision_service.decide.assert_not_called()

    print("✓ Unsupported request rejected without an apology")


def test_session_start_is_logged():
    """Test that the first request of a session logs its ids"""
    with patch("lambda_function.logger") as logger:
        lambda_handler(build_test_event("LaunchRequest"), None)

    started = [c for c in logger.info.call_args_list if c[0][0].startswith("Session started")]
    assert len(started) == 1
    assert started[0][0][1:] == ("amzn1.echo-api.request.test", "amzn1.echo-api.session.test")

    geo_patch, decision_patch, _ = services()
    with geo_patch, decision_patch, patch("lambda_function.logger") as logger:
        lambda_handler(build_test_event("IntentRequest", "AMAZON.HelpIntent", {},
                                        {"city": SEATTLE._asdict()}), None)

    assert not [c for c in logger.info.call_args_list if c[0][0].startswith("Session started")]


def test_session_ended():
    """Test that SessionEndedRequest is accepted"""
    print("Testing SessionEndedRequest...")

    event = build_test_event("SessionEndedRequest")
    event["request"]["reason"] = "USER_INITIATED"

    response = lambda_handler(event, None)
    assert response is not None
    assert "outputSpeech" not in (response.get("response") or {})

    print("✓ SessionEndedRequest handled")


if __name__ == "__main__":
    test_launch_request()
    test_dialog_turns()
    test_one_shot()
    test_service_unavailable()
    test_unexpected_error_is_spoken()
    test_unknown_intent()
    test_missing_request()
    test_wrong_application()
    test_unsupported_request_type()
    test_session_start_is_logged()
    test_session_ended()
    print("\n✅ ASK SDK integration tests passed")
