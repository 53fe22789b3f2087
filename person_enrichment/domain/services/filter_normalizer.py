import re
from typing import Dict, Mapping, Optional

from person_enrichment.domain.exceptions import InvalidParameterError, UnknownParameterError
from person_enrichment.domain.models.listing import (
    DEFAULT_PAGE_LIMIT,
    MAX_AGE_SENTINEL,
    MIN_AGE_DEFAULT,
    TEXT_FILTER_FIELDS,
    FilterSet,
    ListingCriteria,
    Pagination,
)
from person_enrichment.domain.ports.services.logger import LoggerPort

_INTEGER = re.compile(r"[+-]?[0-9]+")

_AGE_PARAMS = {"age": "age", "minAge": "min_age", "maxAge": "max_age"}


def parse_int(param: str, value: str) -> int:
    if not isinstance(value, str) or not _INTEGER.fullmatch(value):
        raise InvalidParameterError(f"query param '{param}' must be an integer, got {value!r}")
    return int(value)


class FilterNormalizer:
    """Turns raw query parameters into listing criteria.

    Pagination is resolved before anything else, so a bad ``page`` is reported
    even when the same request also carries an unknown parameter.
    """

    def __init__(self, logger: LoggerPort):
        self.logger = logger

    def normalize(self, params: Mapping[str, str]) -> ListingCriteria:
        if not params:
            return ListingCriteria(unfiltered=True)

        remaining = dict(params)
        page = remaining.pop("page", None)
        limit = remaining.pop("limit", None)
        pagination = self._resolve_pagination(page, limit)

        values: Dict[str, object] = {}
        for param, value in remaining.items():
            if param in TEXT_FILTER_FIELDS:
                values[param] = value
            elif param in _AGE_PARAMS:
                values[_AGE_PARAMS[param]] = parse_int(param, value)
            else:
                self.logger.warning("Invalid query param", param=param)
                raise UnknownParameterError(param)

        filters = self._reconcile_ages(FilterSet(**values))
        self.logger.debug("Normalized listing params", filters=filters.model_dump(exclude_none=True))
        return ListingCriteria(filters=filters, pagination=pagination)

    def _resolve_pagination(self, page: Optional[str], limit: Optional[str]) -> Optional[Pagination]:
        if page is None and limit is None:
            return None
        return Pagination(
            page=parse_int("page", page) if page is not None else 1,
            limit=parse_int("limit", limit) if limit is not None else DEFAULT_PAGE_LIMIT,
        )

    @staticmethod
    def _reconcile_ages(filters: FilterSet) -> FilterSet:
        if filters.age is not None:
            return filters.model_copy(update={"min_age": None, "max_age": None})
        if filters.min_age is not None and filters.max_age is None:
            return filters.model_copy(update={"max_age": MAX_AGE_SENTINEL})
        if filters.max_age is not None and filters.min_age is None:
            return filters.model_copy(update={"min_age": MIN_AGE_DEFAULT})
        return filters
