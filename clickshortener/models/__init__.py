from clickshortener.models.click_model import ClickModel, ClickOutcome, GeolocationModel
from clickshortener.models.short_url_model import ShortURLModel
from clickshortener.models.submission_model import FieldError, SubmissionModel


__all__ = [
    'ClickModel',
    'ClickOutcome',
    'GeolocationModel',
    'ShortURLModel',
    'FieldError',
    'SubmissionModel',
]
