from typing import Any, Mapping

from person_enrichment.applications.interfaces.dtos.message import Message
from person_enrichment.domain.exceptions import InvalidParameterError, NotFoundError
from person_enrichment.domain.ports.repositories.person_repository import PersonRepository
from person_enrichment.domain.ports.services.logger import LoggerPort
from person_enrichment.domain.services.person_fields import parse_person_fields


class UpdatePersonUseCase:
    def __init__(self, person_repository: PersonRepository, logger: LoggerPort):
        self.person_repository = person_repository
        self.logger = logger

    async def execute(self, person_id: int, payload: Mapping[str, Any]) -> Message:
        updates = {field: value for field, value in payload.items() if field != "id"}
        self.logger.debug("Updating person", id=person_id, updates=updates)

        changes = parse_person_fields(updates)
        if changes.is_empty():
            raise InvalidParameterError("no fields to update")

        updated = await self.person_repository.update(person_id, changes)
        if not updated:
            raise NotFoundError(f"Person with id {person_id} not found")

        return Message(message="Person updated")
