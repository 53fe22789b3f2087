from abc import ABC, abstractmethod
from typing import List, Optional

from person_enrichment.domain.models.listing import PeopleQuery
from person_enrichment.domain.models.person import Person, PersonChanges


class PersonRepository(ABC):
    @abstractmethod
    async def get_all(self) -> List[Person]:
        pass

    @abstractmethod
    async def find(self, query: PeopleQuery) -> List[Person]:
        pass

    @abstractmethod
    async def get_by_id(self, person_id: int) -> Optional[Person]:
        pass

    @abstractmethod
    async def create(self, person: Person) -> int:
        pass

    @abstractmethod
    async def update(self, person_id: int, changes: PersonChanges) -> bool:
        pass

    @abstractmethod
    async def delete(self, person_id: int) -> bool:
        pass
