"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. base_url() correct extraction
   - 1.1. Ensures URLs include the stage (e.g., `/Prod`) when invoked via AWS.
   - 1.2. Ensures URLs do NOT include stage information for clean public links.
   - 1.3. Confirms a proper localhost fallback is returned when no domain is present.

2. get_short_url() retrieves short URL string representation

3. get_header() looks headers up case-insensitively

4. utc_now() returns timezone-aware UTC time

5. require_environment() decorator behavior
   - 5.1. Ensures decorated functions execute when all env vars are present.
   - 5.2. Ensures missing or empty env vars raise a descriptive KeyError.

6. guarantee_500_response() decorator behavior
"""

import json
from datetime import datetime, UTC

import pytest
from freezegun import freeze_time

from clickshortener.utils.helpers import (
    base_url,
    get_header,
    get_short_url,
    utc_now,
    require_environment,
    guarantee_500_response,
)


# -------------------------------
# 1.1. AWS default domain handling
# -------------------------------


@pytest.mark.parametrize(
    'domain, stage, expected',
    [
        ('abc123.execute-api.us-east-1.amazonaws.com', 'Dev', 'https://abc123.execute-api.us-east-1.amazonaws.com/Dev'),
        ('abc123.execute-api.us-east-1.amazonaws.com', 'Prod', 'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'),
    ],
)
def test_base_url_with_aws_domain(domain, stage, expected):
    """Ensure base_url() appends stage for default AWS execute-api domains."""
    event = {'requestContext': {'domainName': domain, 'stage': stage}}
    assert base_url(event) == expected


# -------------------------------
# 1.2. Custom domain handling
# -------------------------------


@pytest.mark.parametrize(
    'domain, stage, expected',
    [
        ('sho.rt', 'Prod', 'https://sho.rt'),
        ('example.com', 'Dev', 'https://example.com'),
    ],
)
def test_base_url_with_custom_domain(domain, stage, expected):
    """Ensure base_url() excludes stage for custom user-defined domains."""
    event = {'requestContext': {'domainName': domain, 'stage': stage}}
    assert base_url(event) == expected


# -------------------------------
# 1.3. Local fallback behavior
# -------------------------------


@pytest.mark.parametrize(
    'event',
    [
        {},
        {'requestContext': {}},
        {'requestContext': {'domainName': ''}},
        {'requestContext': {'stage': 'Dev'}},
    ],
)
def test_base_url_local_fallback(event):
    """Ensure base_url() returns localhost URL when no domain is provided."""
    assert base_url(event) == 'http://localhost:3000'


# -------------------------------
# 2. Get short url string representation
# -------------------------------


@pytest.mark.parametrize(
    'shortcode, event, expected',
    [
        ('abc123', {'requestContext': {'domainName': 'sho.rt', 'stage': 'Prod'}}, 'https://sho.rt/abc123'),
        ('XyZ789', {}, 'http://localhost:3000/XyZ789'),
    ],
)
def test_get_short_url(shortcode, event, expected):
    """Ensure get_short_url() returns the correct short URL string."""
    assert get_short_url(shortcode, event) == expected


# -------------------------------
# 3. Request headers
# -------------------------------


@pytest.mark.parametrize('name', ['Referer', 'referer', 'REFERER'])
def test_get_header_is_case_insensitive(name):
    event = {'headers': {'referer': 'https://news.ycombinator.com/', 'User-Agent': 'curl/8.0'}}
    assert get_header(event, name) == 'https://news.ycombinator.com/'


@pytest.mark.parametrize('event', [{}, {'headers': None}, {'headers': {'Accept': '*/*'}}])
def test_get_header_missing(event):
    assert get_header(event, 'Referer') is None


# -------------------------------
# 4. Current time
# -------------------------------


@freeze_time('2025-10-15 12:00:00')
def test_utc_now():
    now = utc_now()
    assert now == datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)
    assert now.tzinfo is not None


# -------------------------------
# 5.1. require_environment() happy path
# -------------------------------


def test_require_environment_happy_path(monkeypatch):
    """5.1. Decorated function executes when all env vars are present."""
    monkeypatch.setenv('ENV1', 'value1')
    monkeypatch.setenv('ENV2', 'value2')

    @require_environment('ENV1', 'ENV2')
    def sample_function(x: int) -> int:
        return x + 1

    assert sample_function(1) == 2


# -------------------------------
# 5.2. require_environment() missing or empty env vars
# -------------------------------


@pytest.mark.parametrize(
    'env_setup, missing_names',
    [
        ({'ENV1': None, 'ENV2': 'value2'}, ["'ENV1'"]),
        ({'ENV1': '', 'ENV2': 'value2'}, ["'ENV1'"]),
        ({'ENV1': None, 'ENV2': None}, ["'ENV1'", "'ENV2'"]),
        ({'ENV1': '', 'ENV2': ''}, ["'ENV1'", "'ENV2'"]),
    ],
)
def test_require_environment_missing_or_empty(monkeypatch, env_setup, missing_names):
    """5.2. Missing or empty env vars raise a descriptive KeyError."""
    for name, value in env_setup.items():
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)

    @require_environment('ENV1', 'ENV2')
    def sample_function() -> None:
        pass

    expected_message = f'Missing required environment variables: {", ".join(missing_names)}'
    with pytest.raises(KeyError, match=expected_message):
        sample_function()


# -------------------------------
# 6. guarantee_500_response() behavior
# -------------------------------


def test_guarantee_500_response(monkeypatch):
    """6.1. Faulty lambda handler returns 500 response when not running locally."""
    monkeypatch.setattr('clickshortener.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    response = faulty_lambda_handler({}, None)
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body['message'] == 'Internal Server Error'
    assert body['error_code'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'


def test_guarantee_500_response_reraises_when_running_locally(monkeypatch):
    """6.2. Faulty lambda handler reraises the original exception when running locally."""
    monkeypatch.setattr('clickshortener.utils.helpers.running_locally', lambda: True)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        faulty_lambda_handler({}, None)


def test_guarantee_500_response_passes_through_responses():
    @guarantee_500_response
    def lambda_handler(event, context):
        return {'statusCode': 200, 'body': '{}'}

    assert lambda_handler({}, None) == {'statusCode': 200, 'body': '{}'}
