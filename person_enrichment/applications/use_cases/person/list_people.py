from typing import List, Mapping

from person_enrichment.applications.interfaces.dtos.person import PersonPublic
from person_enrichment.domain.ports.repositories.person_repository import PersonRepository
from person_enrichment.domain.ports.services.logger import LoggerPort
from person_enrichment.domain.services.filter_normalizer import FilterNormalizer
from person_enrichment.domain.services.predicate_builder import PredicateBuilder


class ListPeopleUseCase:
    def __init__(self, person_repository: PersonRepository, logger: LoggerPort):
        self.person_repository = person_repository
        self.logger = logger
        self.normalizer = FilterNormalizer(logger)
        self.builder = PredicateBuilder()

    async def execute(self, params: Mapping[str, str]) -> List[PersonPublic]:
        self.logger.debug("Listing people", params=dict(params))

        criteria = self.normalizer.normalize(params)
        if criteria.unfiltered:
            people = await self.person_repository.get_all()
        else:
            query = self.builder.build(criteria.filters, criteria.pagination)
            people = await self.person_repository.find(query)

        return [PersonPublic.model_validate(person, from_attributes=True) for person in people]
