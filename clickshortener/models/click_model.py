from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from clickshortener.models.helpers import parse_timestamp, format_timestamp


@dataclass(frozen=True)
class GeolocationModel:
    """Location snapshot attached to a click."""

    country: str
    city: str
    ip: str

    def to_dict(self) -> dict[str, Any]:
        return {'country': self.country, 'city': self.city, 'ip': self.ip}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'GeolocationModel':
        return cls(country=data['country'], city=data['city'], ip=data['ip'])


@dataclass(frozen=True)
class ClickModel:
    """One recorded access to a short code's redirect.

    Attributes:
        timestamp (datetime):
            Time of access (timezone-aware, UTC).
        referrer (str):
            Originating page, or 'direct' when the request carried none.
        user_agent (str):
            Client identification string.
        geolocation (GeolocationModel):
            Location snapshot at click time.
    """

    timestamp: datetime
    referrer: str
    user_agent: str
    geolocation: GeolocationModel

    def to_dict(self) -> dict[str, Any]:
        return {
            'timestamp': format_timestamp(self.timestamp),
            'referrer': self.referrer,
            'userAgent': self.user_agent,
            'geolocation': self.geolocation.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ClickModel':
        return cls(
            timestamp=parse_timestamp(data['timestamp']),
            referrer=data['referrer'],
            user_agent=data['userAgent'],
            geolocation=GeolocationModel.from_dict(data['geolocation']),
        )


class ClickOutcome(StrEnum):
    """Result of a best-effort click recording."""

    RECORDED = 'recorded'
    EXPIRED = 'expired'
    NOT_FOUND = 'not_found'
    FAILED = 'failed'
