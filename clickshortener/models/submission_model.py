from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldError:
    """A single validation failure bound to an input field."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {'field': self.field, 'message': self.message}


@dataclass(frozen=True)
class SubmissionModel:
    """A request to shorten one URL.

    Attributes:
        url (str):
            The long URL to shorten.
        validity_minutes (int | None):
            Minutes until expiry. None means the default validity.
        custom_shortcode (str | None):
            Requested short code. None or empty means a generated one.

    Example:
        >>> SubmissionModel.from_dict({'url': 'https://example.com', 'validityMinutes': 10})
        SubmissionModel(url='https://example.com', validity_minutes=10, custom_shortcode=None)
    """

    url: str
    validity_minutes: int | None = None
    custom_shortcode: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'SubmissionModel':
        """Build a submission from its JSON form

        Raises:
            ValueError: If the payload is not an object or a field has the wrong JSON type.
        """
        if not isinstance(data, dict):
            raise ValueError('Submission must be a JSON object.')

        url = data.get('url', '')
        validity_minutes = data.get('validityMinutes')
        custom_shortcode = data.get('customShortCode')

        if not isinstance(url, str):
            raise ValueError("'url' must be a string.")
        if validity_minutes is not None and (isinstance(validity_minutes, bool) or not isinstance(validity_minutes, int | float)):
            raise ValueError("'validityMinutes' must be a number.")
        if isinstance(validity_minutes, float) and validity_minutes.is_integer():
            validity_minutes = int(validity_minutes)
        if custom_shortcode is not None and not isinstance(custom_shortcode, str):
            raise ValueError("'customShortCode' must be a string.")

        return cls(url=url, validity_minutes=validity_minutes, custom_shortcode=custom_shortcode)
