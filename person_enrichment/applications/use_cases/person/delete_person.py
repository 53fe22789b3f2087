from person_enrichment.applications.interfaces.dtos.message import Message
from person_enrichment.domain.exceptions import NotFoundError
from person_enrichment.domain.ports.repositories.person_repository import PersonRepository
from person_enrichment.domain.ports.services.logger import LoggerPort


class DeletePersonUseCase:
    def __init__(self, person_repository: PersonRepository, logger: LoggerPort):
        self.person_repository = person_repository
        self.logger = logger

    async def execute(self, person_id: int) -> Message:
        self.logger.debug("Deleting person", id=person_id)
        deleted = await self.person_repository.delete(person_id)
        if not deleted:
            raise NotFoundError(f"Person with id {person_id} not found")

        return Message(message="Person deleted")
