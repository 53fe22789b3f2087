from person_enrichment.applications.interfaces.dtos.person import PersonPublic
from person_enrichment.domain.exceptions import NotFoundError
from person_enrichment.domain.ports.repositories.person_repository import PersonRepository
from person_enrichment.domain.ports.services.logger import LoggerPort


class GetPersonUseCase:
    def __init__(self, person_repository: PersonRepository, logger: LoggerPort):
        self.person_repository = person_repository
        self.logger = logger

    async def execute(self, person_id: int) -> PersonPublic:
        self.logger.debug("Getting person", id=person_id)
        person = await self.person_repository.get_by_id(person_id)
        if not person:
            raise NotFoundError(f"Person with id {person_id} not found")

        return PersonPublic.model_validate(person, from_attributes=True)
