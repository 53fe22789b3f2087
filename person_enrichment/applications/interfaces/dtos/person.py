from pydantic import BaseModel, ConfigDict


class PersonPublic(BaseModel):
    id: int
    name: str
    surname: str
    patronymic: str = ""
    age: int = 0
    gender: str = ""
    nationality: str = ""
    model_config = ConfigDict(from_attributes=True)


class PersonCreated(BaseModel):
    id: int


class ErrorResponse(BaseModel):
    error: str
