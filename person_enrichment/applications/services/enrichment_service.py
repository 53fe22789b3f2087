import asyncio
from typing import Union

from pydantic import BaseModel

from person_enrichment.domain.ports.services.attribute_provider import AttributeProvider
from person_enrichment.domain.ports.services.logger import LoggerPort


class EnrichedAttributes(BaseModel):
    age: int = 0
    gender: str = ""
    nationality: str = ""


class EnrichmentService:
    """Fetches age, gender and nationality for a name from three providers.

    The lookups run concurrently and are awaited together. A provider that
    fails leaves its attribute at the zero value; the others are unaffected.
    """

    def __init__(
        self,
        age_provider: AttributeProvider,
        gender_provider: AttributeProvider,
        nationality_provider: AttributeProvider,
        logger: LoggerPort,
    ):
        self.age_provider = age_provider
        self.gender_provider = gender_provider
        self.nationality_provider = nationality_provider
        self.logger = logger

    async def enrich(self, name: str) -> EnrichedAttributes:
        if not name:
            self.logger.debug("Empty name, skipping enrichment")
            return EnrichedAttributes()

        self.logger.debug("Enriching person data", name=name)
        providers = (self.age_provider, self.gender_provider, self.nationality_provider)
        results = await asyncio.gather(*(provider.fetch(name) for provider in providers), return_exceptions=True)

        defaults = (0, "", "")
        age, gender, nationality = (
            self._settle(provider, result, default) for provider, result, default in zip(providers, results, defaults)
        )
        return EnrichedAttributes(age=age, gender=gender, nationality=nationality)

    def _settle(self, provider: AttributeProvider, result: Union[int, str, BaseException], default):
        if isinstance(result, Exception):
            self.logger.warning("Provider lookup failed", provider=provider.name, reason=str(result))
            return default
        if isinstance(result, BaseException):
            raise result
        return result
