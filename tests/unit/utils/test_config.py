"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Environment variable resolution
   - Ensures app_env(), app_name(), app_prefix() correctly read environment variables.

2. Configuration loading behavior
   - Ensures load_config() returns the active backend section of the requesting lambda.
   - Validates that AppConfig fetching is safely isolated via monkeypatching.
   - Ensures load_config() raises ClientError when AppConfig calls fail.
   - Ensures unusable documents raise ConfigurationError.
   - Ensures missing AppConfig identifiers raise KeyError before AppConfig is called.
"""

import os
import json
from io import BytesIO
from unittest.mock import MagicMock

import pytest
import botocore

from clickshortener.exceptions import ConfigurationError
from clickshortener.utils import config


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Set up environment variables for testing."""
    monkeypatch.setenv('APPCONFIG_APP_ID', 'app123')
    monkeypatch.setenv('APPCONFIG_ENV_ID', 'env123')
    monkeypatch.setenv('APPCONFIG_PROFILE_ID', 'prof123')


@pytest.fixture
def appconfig_payload():
    """Provide a default AppConfig payload used by multiple tests."""
    # fmt: off
    return {
        'build': 42,
        'active_backend': 'redis',
        'configs': {
            'test_lambda': {
                'redis': {
                    'host': 'monkey',
                    'port': 6380,
                    'db': 3
                }
            }
        },
    }
    # fmt: on


@pytest.fixture
def mock_appconfig(monkeypatch):
    """Mock the AppConfig Data client returned by boto3.client()."""
    _mock_appconfig = MagicMock()
    _mock_appconfig.start_configuration_session.return_value = {'InitialConfigurationToken': 'monkey_token'}
    monkeypatch.setattr(config.boto3, 'client', MagicMock(return_value=_mock_appconfig))
    return _mock_appconfig


def serve(mock_appconfig, content: bytes) -> None:
    mock_appconfig.get_latest_configuration.return_value = {'Configuration': BytesIO(content)}


# -------------------------------
# 1. Environment variable resolution
# -------------------------------


def test_app_env(monkeypatch):
    """Ensure app_env() returns the correct environment value from APP_ENV"""
    monkeypatch.setitem(os.environ, 'APP_ENV', 'Test')
    assert config.app_env() == 'test'


def test_app_env_defaults_to_local(monkeypatch):
    monkeypatch.delitem(os.environ, 'APP_ENV', raising=False)
    assert config.app_env() == 'local'


def test_app_name(monkeypatch):
    """Ensure app_name() returns the correct environment value from APP_NAME"""
    monkeypatch.setitem(os.environ, 'APP_NAME', 'test-app')
    assert config.app_name() == 'test-app'


def test_app_name_not_set(monkeypatch):
    """Ensure app_name() returns None when APP_NAME is not set"""
    monkeypatch.delitem(os.environ, 'APP_NAME', raising=False)
    assert config.app_name() is None


def test_app_prefix(monkeypatch):
    """Ensure app_prefix() joins APP_NAME and APP_ENV"""
    monkeypatch.setitem(os.environ, 'APP_NAME', 'test-app')
    monkeypatch.setitem(os.environ, 'APP_ENV', 'test')
    assert config.app_prefix() == 'test-app:test'


def test_app_prefix_without_app_name(monkeypatch):
    monkeypatch.delitem(os.environ, 'APP_NAME', raising=False)
    assert config.app_prefix() is None


# -------------------------------
# 2. Configuration loading behavior
# -------------------------------


def test_load_config(mock_appconfig, appconfig_payload):
    """Ensure load_config() returns the lambda's section for the active backend."""
    serve(mock_appconfig, json.dumps(appconfig_payload).encode('utf-8'))

    result = config.load_config('test_lambda')

    assert result == {'redis': {'host': 'monkey', 'port': 6380, 'db': 3}}
    config.boto3.client.assert_called_once_with('appconfigdata')
    mock_appconfig.start_configuration_session.assert_called_once_with(
        ApplicationIdentifier='app123',
        EnvironmentIdentifier='env123',
        ConfigurationProfileIdentifier='prof123',
    )
    mock_appconfig.get_latest_configuration.assert_called_once_with(
        ConfigurationToken='monkey_token',
    )


def test_missing_appconfig_raises_error(mock_appconfig):
    """Ensure load_config() propagates ClientError when AppConfig returns an error."""
    mock_appconfig.start_configuration_session.side_effect = botocore.exceptions.ClientError(
        {'Error': {'Code': 'ResourceNotFoundException'}}, 'StartConfigurationSession'
    )

    with pytest.raises(botocore.exceptions.ClientError):
        config.load_config('test_lambda')


@pytest.mark.parametrize(
    'content',
    [
        b'not json',
        b'\xff\xfe',
        b'{"active_backend": "redis", "configs": {}}',
        b'{"active_backend": "redis", "configs": {"test_lambda": {"memcached": {}}}}',
        b'{"configs": {"test_lambda": {"redis": {}}}}',
        b'[]',
    ],
)
def test_unusable_document_raises_configuration_error(mock_appconfig, content):
    serve(mock_appconfig, content)

    with pytest.raises(ConfigurationError, match="no usable 'test_lambda' section"):
        config.load_config('test_lambda')


def test_missing_identifiers_raise_key_error(monkeypatch, mock_appconfig):
    monkeypatch.delenv('APPCONFIG_PROFILE_ID')

    with pytest.raises(KeyError, match='APPCONFIG_PROFILE_ID'):
        config.load_config('test_lambda')

    mock_appconfig.start_configuration_session.assert_not_called()


def test_config_errors_cover_load_failures():
    for error in (ConfigurationError, KeyError, botocore.exceptions.BotoCoreError, botocore.exceptions.ClientError):
        assert error in config.CONFIG_ERRORS
