from clickshortener.services.geolocation import GeolocationBase, MockGeolocation
from clickshortener.services.shortener import ShortenerService
from clickshortener.services.cleanup import CleanupScheduler


__all__ = [
    'GeolocationBase',
    'MockGeolocation',
    'ShortenerService',
    'CleanupScheduler',
]
