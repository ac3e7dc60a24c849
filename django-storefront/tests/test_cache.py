"""Tests for ticket metadata cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest

from factories import metadata
from storefront.domain import TicketTypeId
from storefront.services.metadata_cache import MetadataStatus, TicketMetadataCache
from storefront.services.page_scope import PageScope

GA = TicketTypeId(101)
VIP = TicketTypeId(102)
KIDS = TicketTypeId(103)


@pytest.fixture
def cache(fake_backend) -> TicketMetadataCache:
    fake_backend.metadata = {
        GA: metadata(101, "GA", "25.00"),
        VIP: metadata(102, "VIP", "80.00"),
        KIDS: metadata(103, "Kids", "10.00"),
    }
    return TicketMetadataCache(fake_backend, PageScope("cart"))


class TestResolve:
    """Tests for batched resolution."""

    @pytest.mark.asyncio
    async def test_one_batch_per_change(self, cache, fake_backend):
        """All missing ids go out in a single request."""
        resolved = await cache.resolve({VIP, GA})
        assert fake_backend.metadata_calls == [[GA, VIP]]
        assert set(resolved) == {GA, VIP}

    @pytest.mark.asyncio
    async def test_resolved_ids_are_not_refetched(self, cache, fake_backend):
        """Only ids not yet cached are requested again."""
        await cache.resolve({GA})
        await cache.resolve({GA, KIDS})
        assert fake_backend.metadata_calls == [[GA], [KIDS]]

    @pytest.mark.asyncio
    async def test_entries_are_never_replaced(self, cache, fake_backend):
        """A cached entry survives later backend changes."""
        await cache.resolve({GA})
        fake_backend.metadata[GA] = metadata(101, "Renamed", "99.00")
        await cache.resolve({GA, VIP})
        assert cache.entries[GA].name == "GA"

    @pytest.mark.asyncio
    async def test_status_before_and_after(self, cache):
        """Ids are pending until resolved."""
        assert cache.status(GA) is MetadataStatus.PENDING
        await cache.resolve({GA})
        assert cache.status(GA) is MetadataStatus.RESOLVED


class TestSync:
    """Tests for selection-driven resolution."""

    @pytest.mark.asyncio
    async def test_sync_only_fetches_when_keys_change(self, cache, fake_backend):
        """Quantity edits alone do not trigger a request."""
        await cache.sync({GA: 1})
        await cache.sync({GA: 4})
        assert fake_backend.metadata_calls == [[GA]]

        await cache.sync({GA: 4, VIP: 0})
        assert fake_backend.metadata_calls == [[GA], [VIP]]


class TestFailures:
    """Tests for failed lookups."""

    @pytest.mark.asyncio
    async def test_failed_batch_marks_ids_failed(self, cache, fake_backend):
        """A failed request is a distinct state from pending."""
        fake_backend.metadata_unavailable = True
        resolved = await cache.resolve({GA, VIP})
        assert resolved == {}
        assert cache.failed_ids({GA, VIP}) == {GA, VIP}
        assert cache.pending_ids({GA, VIP}) == set()

    @pytest.mark.asyncio
    async def test_failed_ids_are_retried(self, cache, fake_backend):
        """The next resolve asks again for ids that failed."""
        fake_backend.metadata_unavailable = True
        await cache.resolve({GA})
        fake_backend.metadata_unavailable = False
        resolved = await cache.resolve({GA})
        assert resolved[GA].name == "GA"
        assert cache.status(GA) is MetadataStatus.RESOLVED

    @pytest.mark.asyncio
    async def test_id_missing_from_response_is_failed(self, cache):
        """An id the backend does not know about is reported as failed."""
        await cache.resolve({GA, TicketTypeId(999)})
        assert cache.status(TicketTypeId(999)) is MetadataStatus.FAILED

    @pytest.mark.asyncio
    async def test_retired_scope_discards_results(self, fake_backend):
        """Nothing is written once the page is torn down."""
        fake_backend.metadata = {GA: metadata(101, "GA", "25.00")}
        scope = PageScope("cart")
        cache = TicketMetadataCache(fake_backend, scope)
        scope.retire()
        assert await cache.resolve({GA}) == {}
        assert cache.entries == {}
