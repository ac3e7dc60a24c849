"""Unit tests for fuzzy event search.

Run with: pytest tests/test_search.py -v
"""

import pytest

from factories import make_summary
from storefront.services.search_service import SearchIndex, match_score, search


@pytest.fixture
def catalog():
    return [
        make_summary(1, "Rock Festival", "Loud guitars all weekend"),
        make_summary(2, "Jazz Night", "Live jazz in the park"),
        make_summary(3, "Comedy Gala", "Stand-up from local comics"),
    ]


class TestSearch:
    """Tests for search()."""

    @pytest.mark.parametrize("query", ["", "   ", "\t"])
    def test_blank_query_returns_everything_in_order(self, catalog, query):
        """A blank query skips ranking and keeps catalog order."""
        assert search(catalog, query) == catalog

    def test_exact_title_match(self, catalog):
        """A title word finds its event and nothing unrelated."""
        assert [e.id.value for e in search(catalog, "jazz")] == [2]

    def test_match_is_case_insensitive(self, catalog):
        """Upper-case queries match lower-case text."""
        assert [e.id.value for e in search(catalog, "JAZZ")] == [2]

    def test_typo_still_matches(self, catalog):
        """A one-letter typo stays within the default threshold."""
        assert [e.id.value for e in search(catalog, "jazx")] == [2]

    def test_description_is_searched(self, catalog):
        """Words that only appear in the description still match."""
        assert [e.id.value for e in search(catalog, "guitars")] == [1]

    def test_unrelated_query_returns_nothing(self, catalog):
        """A query far from every field yields an empty list."""
        assert search(catalog, "qwxv") == []

    def test_long_query_does_not_match_short_titles(self):
        """Short fields are not matched just because they fit inside the query."""
        events = [
            make_summary(1, "Art", "Gallery"),
            make_summary(2, "Jazz Night", "Live jazz"),
        ]
        assert search(events, "party tonight downtown") == []

    def test_long_query_matches_close_title(self):
        """A query longer than the title still matches when nearly identical."""
        events = [make_summary(1, "Jazz Night"), make_summary(2, "Art")]
        assert [e.id.value for e in search(events, "jazz nights")] == [1]

    def test_best_match_first(self):
        """Closer matches rank ahead of catalog order."""
        events = [make_summary(1, "Jaz Festival"), make_summary(2, "Jazz Night")]
        assert [e.id.value for e in search(events, "jazz")] == [2, 1]

    def test_ties_keep_catalog_order(self):
        """Equal scores keep the order the catalog gave."""
        events = [
            make_summary(5, "Jazz Brunch"),
            make_summary(3, "Jazz Night"),
            make_summary(9, "Late Jazz"),
        ]
        assert [e.id.value for e in search(events, "jazz")] == [5, 3, 9]

    def test_looser_threshold_never_drops_results(self, catalog):
        """Raising the threshold only ever adds results."""
        thresholds = [0.0, 0.1, 0.2, 0.4, 0.6, 0.8, 1.0]
        for query in ["jazz", "rok", "comic", "park", "qwxv"]:
            previous: set = set()
            for threshold in thresholds:
                current = set(search(catalog, query, threshold=threshold))
                assert previous <= current
                previous = current

    def test_input_list_is_not_mutated(self, catalog):
        """search is pure."""
        before = list(catalog)
        search(catalog, "jazz")
        assert catalog == before


class TestMatchScore:
    """Tests for match_score()."""

    def test_identical_is_zero(self):
        assert match_score("jazz", "Jazz") == 0.0

    def test_empty_text_is_unrelated(self):
        assert match_score("jazz", "") == 1.0

    def test_text_inside_query_is_not_a_match(self):
        """The query is the pattern: a field found inside it scores poorly."""
        assert match_score("party tonight downtown", "Art") > 0.4
        assert match_score("art", "Party tonight downtown") == 0.0


class TestSearchIndex:
    """Tests for SearchIndex."""

    def test_index_holds_snapshot(self, catalog):
        """The index keeps its own copy of the event list."""
        index = SearchIndex(catalog)
        catalog.clear()
        assert len(index.events) == 3

    def test_index_uses_its_threshold(self, catalog):
        """A zero threshold only keeps exact substring matches."""
        strict = SearchIndex(catalog, threshold=0.0)
        assert strict.search("jazx") == []
        assert [e.id.value for e in strict.search("jazz")] == [2]
