from typing import Any, Mapping

from person_enrichment.applications.interfaces.dtos.person import PersonCreated
from person_enrichment.applications.services.enrichment_service import EnrichmentService
from person_enrichment.domain.models.person import Person
from person_enrichment.domain.ports.repositories.person_repository import PersonRepository
from person_enrichment.domain.ports.services.logger import LoggerPort
from person_enrichment.domain.services.person_fields import parse_person_fields, require_creation_fields


class CreatePersonUseCase:
    def __init__(self, person_repository: PersonRepository, enrichment_service: EnrichmentService, logger: LoggerPort):
        self.person_repository = person_repository
        self.enrichment_service = enrichment_service
        self.logger = logger

    async def execute(self, payload: Mapping[str, Any]) -> PersonCreated:
        self.logger.debug("Creating person", payload=dict(payload))

        changes = parse_person_fields(payload)
        require_creation_fields(changes)
        person = Person(**changes.as_values())

        # Inferred attributes replace whatever the client sent for them.
        if person.name:
            attributes = await self.enrichment_service.enrich(person.name)
            person = person.model_copy(update=attributes.model_dump())

        person_id = await self.person_repository.create(person)
        self.logger.info("Person created", id=person_id)
        return PersonCreated(id=person_id)
