"""
Per-view state with request sequencing.

Every refresh takes the next sequence number. A completion is applied only if
its number is still the latest issued, so a slow earlier fetch can never
overwrite the result of a later one. Each refresh still answers its own
caller: a discarded outcome is returned to that request as long as nothing
newer has been applied.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Awaitable, Callable, Dict, Generic, Optional, TypeVar

from portfolio_shared.exceptions import DomainException

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "데이터를 불러오는 중 오류가 발생했습니다."


@dataclass(frozen=True)
class ViewSnapshot(Generic[T]):
    loading: bool
    error: Optional[str]
    data: Optional[T]
    sequence: int


class SequencedView(Generic[T]):
    """Holds the latest accepted result of one view (summary page or one unit page)."""

    def __init__(self, name: str, error_message: str = DEFAULT_ERROR_MESSAGE):
        self.name = name
        self.error_message = error_message
        self._issued = 0
        self._applied = 0
        self._loading = False
        self._error: Optional[str] = None
        self._data: Optional[T] = None

    @property
    def latest_issued(self) -> int:
        return self._issued

    def begin(self) -> int:
        self._issued += 1
        self._loading = True
        self._error = None
        return self._issued

    def is_current(self, sequence: int) -> bool:
        return sequence == self._issued

    def _accept(self, sequence: int) -> bool:
        if not self.is_current(sequence):
            logger.info(
                f"[{self.name}] discarding stale response #{sequence} (latest issued #{self._issued})"
            )
            return False
        self._applied = sequence
        self._loading = False
        return True

    def complete(self, sequence: int, data: T) -> bool:
        if not self._accept(sequence):
            return False
        self._data = data
        self._error = None
        return True

    def fail(self, sequence: int, message: str) -> bool:
        # previous data is kept so the view still shows the last good snapshot
        if not self._accept(sequence):
            return False
        self._error = message
        return True

    async def refresh(self, loader: Callable[[], Awaitable[T]]) -> ViewSnapshot[T]:
        """
        Run ``loader`` under a new sequence number and return what this request should show.

        Fetch-path errors are converted into a display message; nothing is
        re-raised. When a newer refresh has already been applied, its state is
        returned. When this outcome was discarded while the newer refresh is
        still in flight, the caller gets its own result instead of the empty or
        older view state.
        """
        sequence = self.begin()
        try:
            data = await loader()
        except DomainException as e:
            logger.error(f"[{self.name}] refresh #{sequence} failed: {e.code} {e.message}")
            return self._settle(sequence, None, e.message)
        except Exception as e:
            logger.exception(f"[{self.name}] refresh #{sequence} failed: {e}")
            return self._settle(sequence, None, self.error_message)
        return self._settle(sequence, data, None)

    def _settle(self, sequence: int, data: Optional[T], error: Optional[str]) -> ViewSnapshot[T]:
        applied = self.fail(sequence, error) if error is not None else self.complete(sequence, data)
        if applied or self._applied > sequence:
            # the request itself is finished even if a newer one is still loading
            return replace(self.snapshot(), loading=False)
        return ViewSnapshot(
            loading=False,
            error=error,
            data=data if error is None else self._data,
            sequence=sequence,
        )

    def snapshot(self) -> ViewSnapshot[T]:
        return ViewSnapshot(
            loading=self._loading,
            error=self._error,
            data=self._data,
            sequence=self._applied,
        )


class ViewRegistry(Generic[T]):
    """Lazily created views keyed by name (one per unit slug)."""

    def __init__(self, error_message: str = DEFAULT_ERROR_MESSAGE):
        self.error_message = error_message
        self._views: Dict[str, SequencedView[T]] = {}

    def get(self, key: str) -> SequencedView[T]:
        view = self._views.get(key)
        if view is None:
            view = SequencedView(key, error_message=self.error_message)
            self._views[key] = view
        return view

    def __len__(self) -> int:
        return len(self._views)
