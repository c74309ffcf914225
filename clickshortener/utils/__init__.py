from clickshortener.utils.config import app_env, app_name, app_prefix, load_config
from clickshortener.utils.helpers import base_url, get_short_url, get_header, require_environment, utc_now
from clickshortener.utils.shortener import random_shortcode
from clickshortener.utils.logging import initialize_logging


__all__ = [
    'random_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'base_url',
    'get_short_url',
    'get_header',
    'require_environment',
    'utc_now',
    'initialize_logging',
]
