"""
Pytest fixtures and test configuration for conviction tests.
"""

from typing import Any, Dict

import pytest

from conviction.api import ConvictionApi
from conviction.config import Session
from conviction.index import IndexResolver
from conviction.storage import STATE_ALIAS, ConvictionStorage
from conviction.testing import InMemoryNetwork
from conviction.types import PublicConfig

from constants import ALICE_DID, CHAIN_ID, DEFINITIONS, SERVICE_DID, SERVICE_URI


@pytest.fixture
def public_config() -> PublicConfig:
    return PublicConfig(
        **{
            "ceramic": {
                "did": SERVICE_DID,
                "schemas": {"Proposal": "ceramic://kjzl-schema-proposal"},
                "definitions": DEFINITIONS,
            },
            "environment": {"chainId": CHAIN_ID},
        }
    )


@pytest.fixture
def service_network() -> InMemoryNetwork:
    """Session of the service identity; owns the global state."""
    return InMemoryNetwork(did=SERVICE_DID)


@pytest.fixture
def network(service_network) -> InMemoryNetwork:
    """Alice's session, sharing the service's store."""
    return service_network.as_identity(ALICE_DID)


@pytest.fixture
def session(network, public_config) -> Session:
    return Session(network=network, service_uri=SERVICE_URI, config=public_config)


@pytest.fixture
def storage(session) -> ConvictionStorage:
    return ConvictionStorage(session)


@pytest.fixture
def api(session) -> ConvictionApi:
    return ConvictionApi(session)


@pytest.fixture
def seed(service_network):
    """Publish documents as the service identity.

    Usage: ``await seed.state({...})`` and ``await seed.document({...})``.
    """

    class Seeder:
        async def document(self, content: Dict[str, Any], did: str = SERVICE_DID) -> str:
            doc = await service_network.as_identity(did).create(content)
            return doc.url

        async def state(self, state: Dict[str, Any]) -> str:
            index = IndexResolver(service_network, DEFINITIONS)
            return await index.set(STATE_ALIAS, state)

    return Seeder()
