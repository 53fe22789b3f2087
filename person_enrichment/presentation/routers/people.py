from http import HTTPStatus
from typing import Annotated, Any, Dict, List

from fastapi import APIRouter, Body, Depends, Request

from person_enrichment.applications.interfaces.dtos.message import Message
from person_enrichment.applications.interfaces.dtos.person import PersonCreated, PersonPublic
from person_enrichment.applications.services.enrichment_service import EnrichmentService
from person_enrichment.applications.use_cases.person.create_person import CreatePersonUseCase
from person_enrichment.applications.use_cases.person.delete_person import DeletePersonUseCase
from person_enrichment.applications.use_cases.person.get_person import GetPersonUseCase
from person_enrichment.applications.use_cases.person.list_people import ListPeopleUseCase
from person_enrichment.applications.use_cases.person.update_person import UpdatePersonUseCase
from person_enrichment.domain.ports.repositories.person_repository import PersonRepository
from person_enrichment.domain.ports.services.logger import LoggerPort
from person_enrichment.infrastructure.config.dependencies import (
    get_enrichment_service,
    get_logger,
    get_person_repository,
)

router = APIRouter(prefix="/people", tags=["people"])

PersonRepositoryDep = Annotated[PersonRepository, Depends(get_person_repository)]
EnrichmentServiceDep = Annotated[EnrichmentService, Depends(get_enrichment_service)]
LoggerDep = Annotated[LoggerPort, Depends(get_logger)]
PayloadBody = Annotated[Dict[str, Any], Body()]


@router.get("", response_model=List[PersonPublic])
async def read_people(request: Request, person_repository: PersonRepositoryDep, logger: LoggerDep):
    # repeated query params resolve to their last occurrence
    params = dict(request.query_params)
    use_case = ListPeopleUseCase(person_repository, logger)
    return await use_case.execute(params)


@router.get("/{person_id}", response_model=PersonPublic)
async def read_person(person_id: int, person_repository: PersonRepositoryDep, logger: LoggerDep):
    use_case = GetPersonUseCase(person_repository, logger)
    return await use_case.execute(person_id)


@router.post("", status_code=HTTPStatus.CREATED, response_model=PersonCreated)
async def create_person(
    payload: PayloadBody,
    person_repository: PersonRepositoryDep,
    enrichment_service: EnrichmentServiceDep,
    logger: LoggerDep,
):
    use_case = CreatePersonUseCase(person_repository, enrichment_service, logger)
    return await use_case.execute(payload)


@router.put("/{person_id}", response_model=Message)
async def update_person(
    person_id: int, payload: PayloadBody, person_repository: PersonRepositoryDep, logger: LoggerDep
):
    use_case = UpdatePersonUseCase(person_repository, logger)
    return await use_case.execute(person_id, payload)


@router.delete("/{person_id}", response_model=Message)
async def delete_person(person_id: int, person_repository: PersonRepositoryDep, logger: LoggerDep):
    use_case = DeletePersonUseCase(person_repository, logger)
    return await use_case.execute(person_id)
