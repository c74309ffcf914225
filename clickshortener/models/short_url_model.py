from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from clickshortener.models.click_model import ClickModel
from clickshortener.models.helpers import parse_timestamp, format_timestamp


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping and its click history.

    Records are never mutated in place: expiry marking and click appension
    return new instances which the store persists.

    Attributes:
        id (str):
            Opaque unique identifier assigned at creation.
        target (str):
            The original long URL that the short code redirects to.
        shortcode (str):
            The unique, case-sensitive short identifier.
        created_at (datetime):
            Creation time (timezone-aware, UTC).
        expires_at (datetime):
            created_at + validity_minutes. The short URL stops redirecting after it.
        validity_minutes (int):
            Validity window in minutes.
        clicks (tuple[ClickModel, ...]):
            Append-only click history.
        is_expired (bool):
            Cached expiry flag. Set on the first lookup past expires_at and never cleared.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> created_at = datetime(2025, 10, 15, tzinfo=UTC)
        >>> url = ShortURLModel(
        ...     id='m1x2y3',
        ...     target='https://example.com/article/123',
        ...     shortcode='abc123',
        ...     created_at=created_at,
        ...     expires_at=created_at + timedelta(minutes=30),
        ...     validity_minutes=30,
        ... )
        >>> url.has_expired(created_at + timedelta(minutes=31))
        True
        >>> url.mark_expired().is_expired
        True
    """

    id: str
    target: str
    shortcode: str
    created_at: datetime
    expires_at: datetime
    validity_minutes: int
    clicks: tuple[ClickModel, ...] = ()
    is_expired: bool = False

    def has_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    def mark_expired(self) -> 'ShortURLModel':
        return replace(self, is_expired=True)

    def with_click(self, click: ClickModel) -> 'ShortURLModel':
        return replace(self, clicks=(*self.clicks, click))

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'originalUrl': self.target,
            'shortCode': self.shortcode,
            'createdAt': format_timestamp(self.created_at),
            'expiresAt': format_timestamp(self.expires_at),
            'validityMinutes': self.validity_minutes,
            'clicks': [click.to_dict() for click in self.clicks],
            'isExpired': self.is_expired,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ShortURLModel':
        """Revive a record from its JSON form

        Raises:
            KeyError: If a required key is missing.
            TypeError | ValueError: If a timestamp can't be revived or isExpired isn't a bool.
        """
        is_expired = data.get('isExpired', False)
        if not isinstance(is_expired, bool):
            raise TypeError(f'isExpired must be of type bool (given type: {type(is_expired).__name__}).')

        return cls(
            id=data['id'],
            target=data['originalUrl'],
            shortcode=data['shortCode'],
            created_at=parse_timestamp(data['createdAt']),
            expires_at=parse_timestamp(data['expiresAt']),
            validity_minutes=data['validityMinutes'],
            clicks=tuple(ClickModel.from_dict(click) for click in data.get('clicks', [])),
            is_expired=is_expired,
        )
