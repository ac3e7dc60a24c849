"""Liveness tracking for one page's in-flight network calls."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from storefront.logger_config import layer_logger

logger = layer_logger("service")

T = TypeVar("T")


class PageScope:
    """Liveness token owned by one page.

    Every network call the page makes runs through `run`. Once the page is
    retired, outstanding calls are cancelled and any result that still
    arrives is dropped instead of being applied to the retired state.
    """

    def __init__(self, name: str = "page") -> None:
        self.name = name
        self._alive = True
        self._tasks: set[asyncio.Task] = set()

    @property
    def alive(self) -> bool:
        return self._alive

    async def run(self, awaitable: Awaitable[T], apply: Callable[[T], None]) -> bool:
        """Await a call and hand its result to apply while the page is alive.

        Returns True when the result was applied. Exceptions from the call
        propagate to the caller unless the page was retired meanwhile.
        """
        if not self._alive:
            logger.debug(f"{self.name}: scope retired, call not started")
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            return False

        task = asyncio.ensure_future(awaitable)
        self._tasks.add(task)
        try:
            result = await task
        except asyncio.CancelledError:
            if self._alive:
                raise
            logger.debug(f"{self.name}: call cancelled on teardown")
            return False
        except Exception:
            if not self._alive:
                logger.debug(f"{self.name}: dropping failure after teardown")
                return False
            raise
        finally:
            self._tasks.discard(task)

        if not self._alive:
            logger.debug(f"{self.name}: dropping result after teardown")
            return False
        apply(result)
        return True

    def retire(self) -> None:
        """Mark the page torn down and cancel its outstanding calls."""
        self._alive = False
        for task in list(self._tasks):
            task.cancel()

    async def __aenter__(self) -> "PageScope":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.retire()
