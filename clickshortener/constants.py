from enum import StrEnum


class Shortcode:
    """Short code shape and generation limits."""

    LENGTH = 6  # Length of generated short codes
    MIN_CUSTOM_LENGTH = 3
    MAX_CUSTOM_LENGTH = 20
    MAX_GENERATION_ATTEMPTS = 16  # Redraws before giving up on a free short code


class Validity:
    """Validity window bounds in minutes."""

    DEFAULT_MINUTES = 30
    MIN_MINUTES = 1
    MAX_MINUTES = 525_600  # 60 * 24 * 365


class Batch:
    MAX_SIZE = 5  # Maximum URLs per submission


class Cleanup:
    INTERVAL_SECONDS = 300  # Expired URL sweep period (5 minutes)


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'


class LogCategory(StrEnum):
    """Telemetry categories attached to log records via `extra`."""

    VALIDATION = 'validation'
    STORE = 'store'
    SHORTENER = 'shortener'
    REDIRECT = 'redirect'
    CLEANUP = 'cleanup'


# Single key holding the JSON array of all short URL records
STORAGE_KEY = 'url_shortener_data'

# Referrer recorded when a click carries none
DIRECT_REFERRER = 'direct'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
