"""Unit tests for CartPersistence.

Run with: pytest tests/test_cart_persistence.py -v
"""

import json

import pytest

from factories import InMemorySelectionStore
from storefront.config import CartStorage
from storefront.domain import TicketTypeId
from storefront.services.cart_persistence import CartPersistence


class TestSaveLoad:
    """Tests for the save/load round trip."""

    @pytest.mark.parametrize(
        "selection",
        [
            {},
            {TicketTypeId(101): 2},
            {TicketTypeId(101): 2, TicketTypeId(102): 0},
            {TicketTypeId(1): 10, TicketTypeId(7): 3, TicketTypeId(42): 1},
        ],
    )
    def test_round_trip(self, selection_store, selection):
        """load() after save() returns an equal mapping."""
        persistence = CartPersistence(selection_store)
        persistence.save(selection)
        assert persistence.load() == selection

    def test_uses_fixed_key_and_json(self, selection_store):
        """The record is JSON under the well-known key."""
        CartPersistence(selection_store).save({TicketTypeId(101): 2})
        assert json.loads(selection_store.data[CartStorage.SELECTION_KEY]) == {"101": 2}

    def test_second_save_replaces(self, selection_store):
        """A later save overwrites instead of merging."""
        persistence = CartPersistence(selection_store)
        persistence.save({TicketTypeId(101): 2, TicketTypeId(102): 1})
        persistence.save({TicketTypeId(103): 4})
        assert persistence.load() == {TicketTypeId(103): 4}


class TestCorruptRecords:
    """Tests for absent and corrupt stored selections."""

    def test_absent_key_is_empty(self, selection_store):
        """No stored record loads as an empty selection."""
        assert CartPersistence(selection_store).load() == {}

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "not json",
            "{",
            "null",
            "[1, 2]",
            '"text"',
            '{"abc": 1}',
            '{"101": -1}',
            '{"101": "2"}',
            '{"101": 2.5}',
            '{"101": true}',
            '{"101": 2, "x": 1}',
        ],
    )
    def test_corrupt_record_is_empty(self, raw):
        """Unreadable records degrade to an empty selection without raising."""
        store = InMemorySelectionStore({CartStorage.SELECTION_KEY: raw})
        assert CartPersistence(store).load() == {}
