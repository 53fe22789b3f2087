from typing import Dict, List, Optional, Union

from person_enrichment.domain.exceptions import ProviderError
from person_enrichment.domain.models.listing import PeopleQuery
from person_enrichment.domain.models.person import Person, PersonChanges
from person_enrichment.domain.ports.repositories.person_repository import PersonRepository
from person_enrichment.domain.ports.services.attribute_provider import AttributeProvider


class StubProvider(AttributeProvider):
    """Attribute provider returning a fixed value, or raising when given an exception"""

    def __init__(self, name: str, result: Union[int, str, Exception]):
        self.name = name
        self.result = result
        self.calls: List[str] = []

    async def fetch(self, name: str):
        self.calls.append(name)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def failing_provider(name: str) -> StubProvider:
    return StubProvider(name, ProviderError(f"{name} request failed: connection refused"))


class InMemoryPersonRepository(PersonRepository):
    def __init__(self):
        self.people: Dict[int, Person] = {}
        self.queries: List[PeopleQuery] = []
        self._next_id = 1

    async def get_all(self) -> List[Person]:
        return list(self.people.values())

    async def find(self, query: PeopleQuery) -> List[Person]:
        self.queries.append(query)
        return list(self.people.values())

    async def get_by_id(self, person_id: int) -> Optional[Person]:
        return self.people.get(person_id)

    async def create(self, person: Person) -> int:
        person_id = self._next_id
        self._next_id += 1
        self.people[person_id] = person.model_copy(update={"id": person_id})
        return person_id

    async def update(self, person_id: int, changes: PersonChanges) -> bool:
        if person_id not in self.people:
            return False
        self.people[person_id] = self.people[person_id].model_copy(update=changes.as_values())
        return True

    async def delete(self, person_id: int) -> bool:
        return self.people.pop(person_id, None) is not None


def create_domain_person(
    *,
    id: Optional[int] = None,
    name: str = "Dmitriy",
    surname: str = "Ushakov",
    patronymic: str = "Vasilevich",
    age: int = 42,
    gender: str = "male",
    nationality: str = "RU",
) -> Person:
    return Person(
        id=id,
        name=name,
        surname=surname,
        patronymic=patronymic,
        age=age,
        gender=gender,
        nationality=nationality,
    )
