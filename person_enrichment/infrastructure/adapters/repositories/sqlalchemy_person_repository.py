from typing import List, Optional

from sqlalchemy import delete, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from person_enrichment.domain.exceptions import RepositoryError
from person_enrichment.domain.models.listing import PeopleQuery
from person_enrichment.domain.models.person import Person as DomainPerson
from person_enrichment.domain.models.person import PersonChanges
from person_enrichment.domain.ports.repositories.person_repository import PersonRepository
from person_enrichment.infrastructure.persistence.models import Person as SQLPerson


class SQLAlchemyPersonRepository(PersonRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, row) -> DomainPerson:
        return DomainPerson(
            id=row.id,
            name=row.name,
            surname=row.surname,
            patronymic=row.patronymic or "",
            age=row.age or 0,
            gender=row.gender or "",
            nationality=row.nationality or "",
        )

    async def get_all(self) -> List[DomainPerson]:
        try:
            result = await self.session.scalars(select(SQLPerson))
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"failed to get people: {e}") from e
        return [self._to_domain(sql_person) for sql_person in result.all()]

    async def find(self, query: PeopleQuery) -> List[DomainPerson]:
        try:
            result = await self.session.execute(text(query.sql), query.params)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"failed to get people with filters: {e}") from e
        return [self._to_domain(row) for row in result.all()]

    async def get_by_id(self, person_id: int) -> Optional[DomainPerson]:
        try:
            sql_person = await self.session.scalar(select(SQLPerson).where(SQLPerson.id == person_id))
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"failed to get person {person_id}: {e}") from e
        return self._to_domain(sql_person) if sql_person else None

    async def create(self, person: DomainPerson) -> int:
        sql_person = SQLPerson(
            name=person.name,
            surname=person.surname,
            patronymic=person.patronymic,
            age=person.age,
            gender=person.gender,
            nationality=person.nationality,
        )
        try:
            self.session.add(sql_person)
            await self.session.commit()
            await self.session.refresh(sql_person)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"failed to create person: {e}") from e
        return sql_person.id

    async def update(self, person_id: int, changes: PersonChanges) -> bool:
        statement = update(SQLPerson).where(SQLPerson.id == person_id).values(**changes.as_values())
        try:
            result = await self.session.execute(statement)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"failed to update person {person_id}: {e}") from e
        return bool(result.rowcount)

    async def delete(self, person_id: int) -> bool:
        try:
            result = await self.session.execute(delete(SQLPerson).where(SQLPerson.id == person_id))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"failed to delete person {person_id}: {e}") from e
        return bool(result.rowcount)
