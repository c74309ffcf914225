"""Click geolocation capability.

GeolocationBase is the contract the shortener depends on. MockGeolocation
answers with a random entry from a fixed candidate list; a network-backed
lookup can replace it without touching any other component.
"""

import random
from abc import ABC, abstractmethod

from clickshortener.models import GeolocationModel


class GeolocationBase(ABC):
    """Interface for click geolocation providers."""

    @abstractmethod
    def sample(self) -> GeolocationModel:
        """Return the location attributed to the current click."""
        pass


class MockGeolocation(GeolocationBase):
    """Pick a location uniformly at random from a fixed list.

    Example:
        >>> MockGeolocation(rng=random.Random(3)).sample()
        GeolocationModel(country='...', city='...', ip='192.168.1.x')
    """

    CANDIDATES = (
        GeolocationModel(country='United States', city='New York', ip='192.168.1.1'),
        GeolocationModel(country='United Kingdom', city='London', ip='192.168.1.2'),
        GeolocationModel(country='Germany', city='Berlin', ip='192.168.1.3'),
        GeolocationModel(country='France', city='Paris', ip='192.168.1.4'),
        GeolocationModel(country='Japan', city='Tokyo', ip='192.168.1.5'),
    )

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()  # noqa: S311

    def sample(self) -> GeolocationModel:
        return self.rng.choice(self.CANDIDATES)
