from typing import Optional

from pydantic import BaseModel

PERSON_FIELDS = ("name", "surname", "patronymic", "age", "gender", "nationality")


class Person(BaseModel):
    name: str
    surname: str
    patronymic: str = ""
    age: int = 0
    gender: str = ""
    nationality: str = ""
    id: Optional[int] = None


class PersonChanges(BaseModel):
    """Validated subset of person fields supplied by a client.

    Only fields that were present in the payload are set; ``as_values`` drops
    the rest so an update touches nothing the client did not send.
    """

    name: Optional[str] = None
    surname: Optional[str] = None
    patronymic: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None

    def as_values(self) -> dict:
        return self.model_dump(exclude_unset=True)

    def is_empty(self) -> bool:
        return not self.model_fields_set
