"""Fuzzy event search over a locally held event list."""

from collections.abc import Iterable, Sequence
from typing import Generic, Protocol, TypeVar

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

from storefront.config import Search


class Searchable(Protocol):
    title: str
    description: str


E = TypeVar("E", bound=Searchable)


def match_score(query: str, text: str) -> float:
    """Distance between query and text: 0.0 is identical, 1.0 unrelated.

    The query is the pattern. When it fits inside the text it is scored
    against the best-aligned window, so a short query scores well against
    a long description. A query longer than the text is scored against the
    whole text, so a short title is never matched by sitting inside a
    long query.
    """
    pattern = default_process(query)
    target = default_process(text)
    if not target:
        return 1.0
    if len(pattern) <= len(target):
        similarity = fuzz.partial_ratio(pattern, target)
    else:
        similarity = fuzz.ratio(pattern, target)
    return 1.0 - similarity / 100.0


def best_score(query: str, event: Searchable, fields: Iterable[str] = Search.FIELDS) -> float:
    return min(match_score(query, getattr(event, name, "") or "") for name in fields)


def search(
    events: Sequence[E],
    query: str,
    threshold: float = Search.DEFAULT_THRESHOLD,
) -> list[E]:
    """Return events matching query, best match first.

    A blank query returns every event in catalog order without scoring.
    Ties keep catalog order.
    """
    if not query or not query.strip():
        return list(events)

    scored = [(best_score(query, event), event) for event in events]
    matches = [(score, event) for score, event in scored if score <= threshold]
    matches.sort(key=lambda pair: pair[0])
    return [event for _, event in matches]


class SearchIndex(Generic[E]):
    """Search over an immutable snapshot of the catalog."""

    def __init__(self, events: Iterable[E], threshold: float = Search.DEFAULT_THRESHOLD) -> None:
        self._events = tuple(events)
        self._threshold = threshold

    @property
    def events(self) -> tuple[E, ...]:
        return self._events

    def search(self, query: str) -> list[E]:
        return search(self._events, query, self._threshold)
