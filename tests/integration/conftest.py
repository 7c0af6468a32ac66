"""Integration test fixtures for full booking flows.

Most fixtures are inherited from tests/conftest.py.
"""
import pytest_asyncio

from src.client import ClientRequest


@pytest_asyncio.fixture
async def ana(studio_client):
    """A registered client named Ana."""
    return await studio_client.create_client(
        ClientRequest(name="Ana", birthdate="1990-05-10", phone="11999990000")
    )
