from typing import Any, Mapping

from person_enrichment.domain.exceptions import (
    InvalidFieldError,
    InvalidParameterError,
    MissingFieldError,
    TypeMismatchError,
)
from person_enrichment.domain.models.person import PersonChanges

REQUIRED_ON_CREATE = ("name", "surname")


def _expect_str(field: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeMismatchError(field, "string")
    return value


def _expect_age(value: Any) -> int:
    # bool is an int subclass; JSON true/false is not an age
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError("age", "integer")
    if value < 0:
        raise InvalidParameterError("field 'age' must be non-negative")
    return value


def parse_person_fields(payload: Mapping[str, Any]) -> PersonChanges:
    values = {}
    for field, value in payload.items():
        match field:
            case "name" | "surname" | "patronymic" | "gender" | "nationality":
                values[field] = _expect_str(field, value)
            case "age":
                values[field] = _expect_age(value)
            case _:
                raise InvalidFieldError(field)
    return PersonChanges(**values)


def require_creation_fields(changes: PersonChanges) -> None:
    for field in REQUIRED_ON_CREATE:
        if field not in changes.model_fields_set:
            raise MissingFieldError(field)
