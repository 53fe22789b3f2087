from typing import List, Optional, Tuple

from person_enrichment.domain.models.listing import FilterSet, Pagination, PeopleQuery

SELECT_PEOPLE = "SELECT id, name, surname, patronymic, age, gender, nationality FROM people"

# Column names below are the only identifiers that ever reach the SQL text.
_AGE_BOUNDS: Tuple[Tuple[str, str], ...] = (
    ("age", "age = {}"),
    ("min_age", "age >= {}"),
    ("max_age", "age <= {}"),
)


class PredicateBuilder:
    """Builds a parameterized SELECT over the people table.

    Placeholders are numbered ``:p1, :p2, ...`` in the same order their values
    are appended to ``PeopleQuery.args``.
    """

    def build(self, filters: FilterSet, pagination: Optional[Pagination] = None) -> PeopleQuery:
        clauses: List[str] = []
        args: list = []

        def placeholder(value) -> str:
            args.append(value)
            return f":p{len(args)}"

        for column, value in filters.text_filters().items():
            clauses.append(f"{column} ILIKE {placeholder(f'%{value}%')}")

        for field, template in _AGE_BOUNDS:
            value = getattr(filters, field)
            if value is not None:
                clauses.append(template.format(placeholder(value)))

        sql = SELECT_PEOPLE
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)

        if pagination is not None:
            limit = placeholder(pagination.limit)
            offset = placeholder(pagination.offset)
            sql += f" LIMIT {limit} OFFSET {offset}"

        return PeopleQuery(sql=sql, args=args)
