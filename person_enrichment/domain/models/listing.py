from typing import Dict, Optional

from pydantic import BaseModel, Field

TEXT_FILTER_FIELDS = ("name", "surname", "patronymic", "gender", "nationality")
AGE_FILTER_FIELDS = ("age", "minAge", "maxAge")

MIN_AGE_DEFAULT = 0
MAX_AGE_SENTINEL = 777
DEFAULT_PAGE_LIMIT = 10


class FilterSet(BaseModel):
    name: Optional[str] = None
    surname: Optional[str] = None
    patronymic: Optional[str] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None
    age: Optional[int] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None

    def text_filters(self) -> Dict[str, str]:
        return {field: getattr(self, field) for field in TEXT_FILTER_FIELDS if getattr(self, field) is not None}

    def is_empty(self) -> bool:
        return not self.text_filters() and self.age is None and self.min_age is None and self.max_age is None


class Pagination(BaseModel):
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class ListingCriteria(BaseModel):
    filters: FilterSet = Field(default_factory=FilterSet)
    pagination: Optional[Pagination] = None
    unfiltered: bool = False


class PeopleQuery(BaseModel):
    sql: str
    args: list = []

    @property
    def params(self) -> dict:
        return {f"p{position}": value for position, value in enumerate(self.args, start=1)}
