from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from person_enrichment.app import app
from person_enrichment.applications.services.enrichment_service import EnrichmentService
from person_enrichment.domain.ports.repositories.person_repository import PersonRepository
from person_enrichment.domain.ports.services.logger import LoggerPort
from person_enrichment.infrastructure.config.dependencies import get_enrichment_service, get_person_repository

from .factories import InMemoryPersonRepository, StubProvider


@pytest.fixture
def logger():
    """Logger port double; bind() hands back the same double"""
    port = Mock(spec=LoggerPort)
    port.bind.return_value = port
    return port


@pytest.fixture
def mock_person_repository():
    """Mock person repository for use case testing"""
    return AsyncMock(spec=PersonRepository)


@pytest.fixture
def mock_enrichment_service():
    return AsyncMock(spec=EnrichmentService)


@pytest.fixture
def in_memory_repository():
    return InMemoryPersonRepository()


@pytest.fixture
def stub_providers():
    return {
        "age": StubProvider("agify", 33),
        "gender": StubProvider("genderize", "female"),
        "nationality": StubProvider("nationalize", "NO"),
    }


@pytest.fixture
def enrichment_service(stub_providers, logger):
    return EnrichmentService(
        age_provider=stub_providers["age"],
        gender_provider=stub_providers["gender"],
        nationality_provider=stub_providers["nationality"],
        logger=logger,
    )


@pytest_asyncio.fixture
async def client_factory():
    """Builds an HTTP client against the app with the given repository and enrichment service"""
    clients = []

    async def build(person_repository, enrichment_service=None, raise_app_exceptions=True):
        app.dependency_overrides[get_person_repository] = lambda: person_repository
        if enrichment_service is not None:
            app.dependency_overrides[get_enrichment_service] = lambda: enrichment_service
        client = AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions), base_url="http://test"
        )
        clients.append(client)
        return client

    yield build

    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()
