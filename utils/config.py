# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

import logging
import os

from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


load_dotenv()


class Config:
    """
    Configuration class for managing environment variables and application settings.
    Provides a centralized location for all configuration values.

    Environment Variables:
        app_id: Alexa skill application ID (default: empty, identity check skipped)
        GEOCODER_URL: Nominatim search endpoint
        FORECAST_URL: Open-Meteo forecast endpoint
        USER_AGENT: User agent sent to the external services
        TIMEZONE: Time zone used to decide what "today" is (default: Europe/London)

    Example:
        Access configuration values:
            app_id = Config.APP_ID
            timeout = Config.HTTP_TIMEOUT
    """

    # Application identifiers
    APP_ID: str = os.environ.get("app_id", "")

    # External services
    GEOCODER_URL: str = os.environ.get(
        "GEOCODER_URL", "https://nominatim.openstreetmap.org/search"
    )
    FORECAST_URL: str = os.environ.get(
        "FORECAST_URL", "https://api.open-meteo.com/v1/forecast"
    )
    USER_AGENT: str = os.environ.get(
        "USER_AGENT", "MODecideAlexaSkill/1.0 (modecide@example.com)"
    )

    # HTTP settings
    HTTP_TIMEOUT: int = int(os.environ.get("HTTP_TIMEOUT", "10"))

    # Dates are resolved relative to this zone
    TIMEZONE: str = os.environ.get("TIMEZONE", "Europe/London")

    # Geocoding cache settings
    GEOCODE_CACHE_SIZE: int = int(os.environ.get("GEOCODE_CACHE_SIZE", "100"))
    GEOCODE_CACHE_TTL: int = int(os.environ.get("GEOCODE_CACHE_TTL", "3600"))

    @classmethod
    def validate(cls):
        """
        Validate configuration values.

        Raises:
            ValueError: If a required configuration value is missing or invalid
        """
        is_test_mode = os.environ.get("SKILLTEST", "").lower() == "true"

        if not is_test_mode and not cls.APP_ID:
            logger.warning("APP_ID not set - application identity will not be verified")

        if not cls.GEOCODER_URL:
            raise ValueError("GEOCODER_URL must be set")

        if not cls.FORECAST_URL:
            raise ValueError("FORECAST_URL must be set")

        if cls.HTTP_TIMEOUT <= 0:
            raise ValueError("HTTP_TIMEOUT must be positive")

        logger.info("Configuration validated successfully")
