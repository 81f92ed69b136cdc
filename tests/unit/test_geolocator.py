#!/usr/bin/env python3
"""
Unit tests for Geolocator class.
"""
import os
import sys
from unittest.mock import Mock

import httpx
import pytest

# Set required environment variables before importing
os.environ["SKILLTEST"] = "true"

# Add the root directory to the path
test_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.dirname(os.path.dirname(test_dir)))

from dialog.errors import ServiceUnavailable  # noqa: E402
from dialog.models import ResolvedLocation  # noqa: E402
from utils.geolocator import Geolocator  # noqa: E402

URL = "https://nominatim.test/search"

SEATTLE = [{
    "lat": "47.6038321",
    "lon": "-122.330062",
    "display_name": "Seattle, King County, Washington, United States",
}]


def make_geolocator(status_code=200, data=None):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = data
    session = Mock()
    session.get.return_value = response
    return Geolocator(URL, "TestAgent/1.0", session=session), session


def test_geolocator_initialization():
    """Test that Geolocator can be initialized"""
    print("Testing Geolocator initialization...")

    geolocator = Geolocator(URL, "TestAgent/1.0", session=Mock())
    assert geolocator.base_url == URL
    assert geolocator.user_agent == "TestAgent/1.0"

    print("✓ Geolocator initialized successfully")


def test_geocode_first_result_wins():
    """Test that the first match becomes the location"""
    print("Testing geocoding...")

    geolocator, session = make_geolocator(data=SEATTLE + [{
        "lat": "1.0", "lon": "2.0", "display_name": "Seattle Hill, Somewhere"
    }])

    location = geolocator.geocode("Seattle")
    assert location == ResolvedLocation("Seattle", 47.6038321, -122.330062)

    args, kwargs = session.get.call_args
    assert args[0] == URL
    assert kwargs["params"]["q"] == "Seattle"
    assert kwargs["params"]["format"] == "json"
    assert kwargs["headers"]["User-Agent"] == "TestAgent/1.0"

    print("✓ First result is used")


def test_geocode_is_idempotent():
    """Test that the same city resolves to the same location"""
    print("Testing repeated geocoding...")

    geolocator, session = make_geolocator(data=SEATTLE)

    first = geolocator.geocode("Seattle")
    second = geolocator.geocode("  seattle ")
    assert first == second
    assert session.get.call_count == 1

    print("✓ Repeated lookups return the same location")


def test_geocode_not_found():
    """Test that no match returns None"""
    geolocator, _ = make_geolocator(data=[])
    assert geolocator.geocode("Nowhereville") is None


def test_geocode_empty_input():
    """Test that empty input doesn't call the service"""
    geolocator, session = make_geolocator(data=SEATTLE)

    assert geolocator.geocode(None) is None
    assert geolocator.geocode("") is None
    assert geolocator.geocode("   ") is None
    session.get.assert_not_called()


def test_geocode_error_status():
    """Test that an error status is a service failure, not a miss"""
    geolocator, _ = make_geolocator(status_code=503)
    with pytest.raises(ServiceUnavailable):
        geolocator.geocode("Seattle")


def test_geocode_unreachable():
    """Test that transport errors are a service failure"""
    session = Mock()
    session.get.side_effect = httpx.ConnectTimeout("timed out")
    geolocator = Geolocator(URL, "TestAgent/1.0", session=session)

    with pytest.raises(ServiceUnavailable):
        geolocator.geocode("Seattle")


if __name__ == "__main__":
    test_geolocator_initialization()
    test_geocode_first_result_wins()
    test_geocode_is_idempotent()
    test_geocode_not_found()
    test_geocode_empty_input()
    test_geocode_error_status()
    test_geocode_unreachable()
    print("\n✅ ALL GEOLOCATOR TESTS PASSED")
