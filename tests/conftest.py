"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, GeneratorConfig
from idgen import IDGenerator, SeedRegistry
from service.app import create_app


@pytest.fixture
def registry():
    """Create an empty seed registry."""
    return SeedRegistry()


@pytest.fixture
def generator(registry):
    """Create a generator with the "test" namespace initialized."""
    gen = IDGenerator(registry)
    gen.init("test")
    return gen


@pytest.fixture
def app_config():
    """Create test service config."""
    return Config(generator=GeneratorConfig(namespaces=["orders", "invoices"], default_block_id=7))


@pytest.fixture
async def app(app_config):
    """Create test FastAPI app."""
    return create_app(app_config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
