# resilience shim — wraps one fetch + transform pipeline with a demo-data fallback
# any failure from the fetcher or the transformer yields the fallback snapshot,
# flags demo mode and raises one user-facing notice. errors are never re-raised.
#
# AnalyticsView holds the result for one screen session. each refresh carries a
# generation number; a completion is applied only if it is still the latest one
# and the view has not been closed.

import copy
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Notice:
    title: str
    message: str


DEMO_NOTICE = Notice(
    title="Using Demo Data",
    message="Could not connect to backend. Showing demo data instead.",
)


@dataclass
class LoadResult(Generic[T]):
    analytics: T
    is_demo: bool


class ResilienceShim(Generic[T]):

    def __init__(
        self,
        fallback: T,
        notify: Optional[Callable[[Notice], None]] = None,
        notice: Notice = DEMO_NOTICE,
    ):
        self.fallback = fallback
        self.notify = notify
        self.notice = notice

    async def load(
        self,
        fetcher: Callable[[], Awaitable[Any]],
        transformer: Callable[[Any], T],
        fallback: Optional[T] = None,
    ) -> LoadResult[T]:
        """fetch, transform, and fall back to demo data on any failure"""
        try:
            raw = await fetcher()
            result = transformer(raw)
        except Exception as e:
            logger.warning(f"Load failed, using demo data: {e!r}")
            snapshot = fallback if fallback is not None else self.fallback
            self._emit_notice()
            return LoadResult(analytics=copy.deepcopy(snapshot), is_demo=True)

        return LoadResult(analytics=result, is_demo=False)

    def _emit_notice(self):
        if self.notify is None:
            return
        try:
            self.notify(self.notice)
        except Exception as e:
            logger.error(f"Demo data notice handler failed: {e!r}")


class AnalyticsView(Generic[T]):
    """analytics state for one screen session, last issued refresh wins"""

    def __init__(
        self,
        shim: ResilienceShim[T],
        fetcher: Callable[[], Awaitable[Any]],
        transformer: Callable[[Any], T],
    ):
        self.shim = shim
        self.fetcher = fetcher
        self.transformer = transformer
        self.generation = 0
        self.in_flight = 0
        self.closed = False
        self.result: Optional[LoadResult[T]] = None

    @property
    def is_loading(self) -> bool:
        return self.in_flight > 0

    @property
    def analytics(self) -> Optional[T]:
        return self.result.analytics if self.result else None

    @property
    def is_demo(self) -> bool:
        return bool(self.result and self.result.is_demo)

    async def refresh(self) -> Optional[LoadResult[T]]:
        """run a full load cycle. returns the applied result, or none if it went stale."""
        self.generation += 1
        issued = self.generation
        self.in_flight += 1
        try:
            result = await self.shim.load(self.fetcher, self.transformer)
        finally:
            self.in_flight -= 1

        if self.closed:
            logger.debug(f"Discarding load {issued}: view closed")
            return None
        if issued != self.generation:
            logger.debug(f"Discarding load {issued}: superseded by {self.generation}")
            return None

        self.result = result
        return result

    def close(self):
        """stop applying results (screen unmounted)"""
        self.closed = True
