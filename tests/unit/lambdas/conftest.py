from typing import cast

import pytest

from clickshortener.types import LambdaConfiguration, LambdaContext


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Run handlers as deployed so unexpected errors become 500 responses."""
    monkeypatch.setenv('APP_ENV', 'test')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)


@pytest.fixture
def context() -> LambdaContext:
    return cast(LambdaContext, {'function_name': 'test_function'})


@pytest.fixture
def lambda_config() -> LambdaConfiguration:
    return cast(LambdaConfiguration, {'redis': {'host': 'redis.test', 'port': 6379, 'db': 0}})


@pytest.fixture
def patch_app(monkeypatch, lambda_config, service):
    """Wire a handler module to the in-memory service instead of AppConfig and Redis."""

    def _patch(app):
        monkeypatch.setattr(app, 'load_config', lambda *a, **kw: lambda_config)
        monkeypatch.setattr(app, 'build_service', lambda *a, **kw: service)

    return _patch
