import pytest

from person_enrichment.domain.models.listing import FilterSet, Pagination
from person_enrichment.domain.services.filter_normalizer import FilterNormalizer
from person_enrichment.domain.services.predicate_builder import SELECT_PEOPLE, PredicateBuilder


class TestPredicateBuilder:
    @pytest.fixture
    def builder(self):
        return PredicateBuilder()

    def test_no_filters_no_pagination_has_no_where_clause(self, builder):
        """Test no filters no pagination has no where clause"""
        query = builder.build(FilterSet())

        assert query.sql == SELECT_PEOPLE
        assert "WHERE" not in query.sql
        assert query.args == []

    def test_text_filter_uses_case_insensitive_contains(self, builder):
        """Test text filter uses case insensitive contains"""
        query = builder.build(FilterSet(name="ali"))

        assert query.sql == f"{SELECT_PEOPLE} WHERE name ILIKE :p1"
        assert query.args == ["%ali%"]

    def test_predicates_are_joined_with_and_in_stable_order(self, builder):
        """Test predicates are joined with and in stable order"""
        query = builder.build(FilterSet(gender="fem", name="An", age=30))

        assert query.sql == f"{SELECT_PEOPLE} WHERE name ILIKE :p1 AND gender ILIKE :p2 AND age = :p3"
        assert query.args == ["%An%", "%fem%", 30]

    def test_age_range(self, builder):
        """Test min and max age become inclusive bounds"""
        query = builder.build(FilterSet(min_age=18, max_age=30))

        assert query.sql.endswith("WHERE age >= :p1 AND age <= :p2")
        assert query.args == [18, 30]

    def test_min_age_only_gets_sentinel_bound(self, builder, logger):
        """Test min age only gets sentinel bound"""
        criteria = FilterNormalizer(logger).normalize({"minAge": "21"})

        query = builder.build(criteria.filters, criteria.pagination)

        assert "age <= :p2" in query.sql
        assert query.params == {"p1": 21, "p2": 777}

    def test_pagination_follows_filters(self, builder):
        """Test pagination follows filters"""
        query = builder.build(FilterSet(surname="ov"), Pagination(page=2, limit=5))

        assert query.sql == f"{SELECT_PEOPLE} WHERE surname ILIKE :p1 LIMIT :p2 OFFSET :p3"
        assert query.args == ["%ov%", 5, 5]

    def test_pagination_without_filters(self, builder):
        """Test pagination without filters"""
        query = builder.build(FilterSet(), Pagination(page=1, limit=10))

        assert query.sql == f"{SELECT_PEOPLE} LIMIT :p1 OFFSET :p2"
        assert query.args == [10, 0]

    def test_zero_and_negative_pagination_pass_through(self, builder):
        """Test zero and negative pagination pass through"""
        query = builder.build(FilterSet(), Pagination(page=0, limit=-3))

        assert query.args == [-3, 3]

    def test_values_never_reach_the_query_text(self, builder):
        """Test values never reach the query text"""
        hostile = "x'; DROP TABLE people; --"

        query = builder.build(FilterSet(name=hostile, nationality=hostile))

        assert hostile not in query.sql
        assert "DROP" not in query.sql
        assert query.args == [f"%{hostile}%", f"%{hostile}%"]

    def test_placeholders_match_argument_positions(self, builder):
        """Test placeholders match argument positions"""
        query = builder.build(
            FilterSet(name="a", surname="b", patronymic="c", gender="d", nationality="e", age=1),
            Pagination(page=3, limit=4),
        )

        placeholders = [token for token in query.sql.split() if token.startswith(":p")]
        assert placeholders == [f":p{i}" for i in range(1, len(query.args) + 1)]
        assert query.params["p6"] == 1
        assert query.params["p8"] == 8
