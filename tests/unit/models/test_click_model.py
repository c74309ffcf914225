"""Unit tests for ClickModel and GeolocationModel."""

import pytest

from clickshortener.models import ClickModel, ClickOutcome, GeolocationModel


def test_click_to_dict(click):
    assert click.to_dict() == {
        'timestamp': '2025-10-15T12:00:00+00:00',
        'referrer': 'https://news.ycombinator.com/',
        'userAgent': 'Mozilla/5.0 (X11; Linux x86_64)',
        'geolocation': {'country': 'Germany', 'city': 'Berlin', 'ip': '192.168.1.3'},
    }


def test_click_from_dict_reverses_to_dict(click):
    assert ClickModel.from_dict(click.to_dict()) == click


def test_click_from_dict_missing_geolocation(click):
    data = click.to_dict()
    del data['geolocation']

    with pytest.raises(KeyError):
        ClickModel.from_dict(data)


def test_geolocation_from_dict():
    data = {'country': 'Japan', 'city': 'Tokyo', 'ip': '192.168.1.5'}

    assert GeolocationModel.from_dict(data) == GeolocationModel(country='Japan', city='Tokyo', ip='192.168.1.5')


def test_click_outcomes_are_strings():
    assert [str(outcome) for outcome in ClickOutcome] == ['recorded', 'expired', 'not_found', 'failed']
