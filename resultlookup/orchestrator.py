"""検索の状態管理.

状態遷移:
  IDLE -> SEARCHING -> SUCCEEDED（結果 or 該当なし） | FAILED（エラー）

入力中（update_term）はストアに問い合わせない。検索要求（submit）で初めて
問い合わせる。新しい要求を出すと古い要求の結果は破棄される（最後の要求が優先）。
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum

from resultlookup.errors import ResultLookupError, ValidationError
from resultlookup.models import RankedResult
from resultlookup.normalizer import clean_term, is_searchable
from resultlookup.service import ResultLookupService

logger = logging.getLogger(__name__)


class SearchState(Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SearchSnapshot:
    """ある時点の検索状態."""

    state: SearchState
    term: str = ""
    requested: bool = False  # 検索要求済みか（入力中と区別する）
    result: RankedResult | None = None  # SUCCEEDED でも None = 該当なし
    error: Exception | None = None  # ResultLookupError 以外も FAILED として保持する
    ticket: int = 0  # 要求ごとに単調増加


class SearchOrchestrator:
    def __init__(
        self,
        service: ResultLookupService | None = None,
        executor: Executor | None = None,
    ) -> None:
        self._service = service or ResultLookupService()
        self._executor = executor
        self._owns_executor = False
        self._lock = threading.Lock()
        self._ticket = 0
        self._pending: Future | None = None
        self._snapshot = SearchSnapshot(SearchState.IDLE)

    @property
    def snapshot(self) -> SearchSnapshot:
        with self._lock:
            return self._snapshot

    def update_term(self, term: str) -> SearchSnapshot:
        """入力中の語を反映する. 実行中の検索は破棄される."""
        with self._lock:
            self._ticket += 1
            self._cancel_pending()
            self._snapshot = SearchSnapshot(SearchState.IDLE, term=term, ticket=self._ticket)
            return self._snapshot

    def submit(self, term: str) -> SearchSnapshot:
        """検索を要求し、完了まで待って状態を返す."""
        ticket = self._begin(term)
        if ticket is None:
            return self.snapshot
        return self._run(ticket, term)

    def submit_async(self, term: str) -> Future | None:
        """検索をバックグラウンドで実行する.

        Returns:
            完了時に SearchSnapshot を返す Future。問い合わせ不要なら None。
        """
        ticket = self._begin(term)
        if ticket is None:
            return None
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="search")
            self._owns_executor = True
        future = self._executor.submit(self._run, ticket, term)
        with self._lock:
            if ticket == self._ticket:
                self._pending = future
        return future

    def _begin(self, term: str) -> int | None:
        """要求を受け付けて SEARCHING に遷移する. 問い合わせ不要なら None."""
        with self._lock:
            self._ticket += 1
            self._cancel_pending()
            ticket = self._ticket

            if not clean_term(term):
                self._snapshot = SearchSnapshot(
                    SearchState.IDLE, term=term, requested=True, ticket=ticket
                )
                return None
            if not is_searchable(term):
                self._snapshot = SearchSnapshot(
                    SearchState.FAILED, term=term, requested=True,
                    error=ValidationError(), ticket=ticket,
                )
                return None

            self._snapshot = SearchSnapshot(
                SearchState.SEARCHING, term=term, requested=True, ticket=ticket
            )
            return ticket

    def _run(self, ticket: int, term: str) -> SearchSnapshot:
        try:
            result = self._service.search(term)
        except ResultLookupError as e:
            snapshot = SearchSnapshot(
                SearchState.FAILED, term=term, requested=True, error=e, ticket=ticket
            )
        except Exception as e:
            # 想定外のエラーでも SEARCHING のまま残さない
            logger.exception("検索中に想定外のエラー: term=%s", term)
            snapshot = SearchSnapshot(
                SearchState.FAILED, term=term, requested=True, error=e, ticket=ticket
            )
        else:
            snapshot = SearchSnapshot(
                SearchState.SUCCEEDED, term=term, requested=True, result=result, ticket=ticket
            )
        return self._apply(snapshot)

    def _apply(self, snapshot: SearchSnapshot) -> SearchSnapshot:
        """最新の要求の結果だけを反映する."""
        with self._lock:
            if snapshot.ticket != self._ticket:
                logger.info("古い検索結果を破棄: term=%s, ticket=%d (最新=%d)",
                            snapshot.term, snapshot.ticket, self._ticket)
                return snapshot
            self._snapshot = snapshot
            self._pending = None
            return snapshot

    def close(self) -> None:
        """自前で生成した executor を停止する."""
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
            self._owns_executor = False

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
