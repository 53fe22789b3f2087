from functools import lru_cache
from typing import Annotated

import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from person_enrichment.applications.services.enrichment_service import EnrichmentService
from person_enrichment.domain.ports.repositories.person_repository import PersonRepository
from person_enrichment.domain.ports.services.logger import LoggerPort
from person_enrichment.infrastructure.adapters.repositories.sqlalchemy_person_repository import (
    SQLAlchemyPersonRepository,
)
from person_enrichment.infrastructure.adapters.services.http_client import get_http_client
from person_enrichment.infrastructure.adapters.services.name_lookup_providers import (
    AgifyProvider,
    GenderizeProvider,
    NationalizeProvider,
)
from person_enrichment.infrastructure.config.settings import Settings
from person_enrichment.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from person_enrichment.infrastructure.persistence.database import get_session


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("person_enrichment")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_person_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> PersonRepository:
    return SQLAlchemyPersonRepository(session)


def get_enrichment_service(
    settings: Annotated[Settings, Depends(get_settings)],
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> EnrichmentService:
    return EnrichmentService(
        age_provider=AgifyProvider(client, settings.AGIFY_URL),
        gender_provider=GenderizeProvider(client, settings.GENDERIZE_URL),
        nationality_provider=NationalizeProvider(client, settings.NATIONALIZE_URL),
        logger=logger.bind(component="enrichment"),
    )
