"""Supabase データベース操作モジュール.

試験結果は results テーブル（RESULTS_TABLE で変更可）に格納されている。
本モジュールは読み取り専用で、書き込み・削除は行わない。
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Protocol

import httpx
from postgrest.exceptions import APIError
from supabase import Client, ClientOptions, SupabaseException, create_client

from resultlookup import config
from resultlookup.errors import StoreError

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """結果ストアのインターフェース. 本モジュール自体がこれを満たす."""

    def search_by_name(self, pattern: str, limit: int = 1) -> list[dict]: ...

    def get_graded_in_category(self, category: int) -> list[dict]: ...


@lru_cache(maxsize=1)
def _get_client() -> Client:
    """Supabase クライアントを初回利用時に生成する."""
    if not config.SUPABASE_URL or not config.SUPABASE_KEY:
        raise StoreError("SUPABASE_URL / SUPABASE_KEY が設定されていません")
    options = ClientOptions(postgrest_client_timeout=config.REQUEST_TIMEOUT)
    try:
        return create_client(config.SUPABASE_URL, config.SUPABASE_KEY, options=options)
    except SupabaseException as e:
        logger.error("Supabase クライアント生成失敗: url=%s, error=%s", config.SUPABASE_URL, e)
        raise StoreError(f"Supabase クライアントを生成できません: {e}") from e


def _table():
    """results テーブルを参照する."""
    return _get_client().table(config.RESULTS_TABLE)


def search_by_name(pattern: str, limit: int = 1) -> list[dict]:
    """name カラムを ILIKE で検索する.

    Args:
        pattern: ILIKE パターン（% を含めて渡す。例: "%sara%ahmed%"）
        limit: 最大取得件数

    Returns:
        [{"name", "no", "category", "grade", "rank"}, ...]

    Raises:
        StoreError: 通信・クエリエラー時
    """
    try:
        resp = (
            _table()
            .select("*")
            .ilike("name", pattern)
            .limit(limit)
            .execute()
        )
    except (APIError, httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("氏名検索失敗: pattern=%s, error=%s", pattern, e)
        raise StoreError(f"氏名検索に失敗しました: {e}") from e

    return resp.data or []


def get_graded_in_category(category: int) -> list[dict]:
    """同一カテゴリで得点のあるレコードを得点の降順で取得する.

    同点の並びは DB の返却順のまま。

    Returns:
        [{"grade", "name"}, ...]

    Raises:
        StoreError: 通信・クエリエラー時
    """
    try:
        resp = (
            _table()
            .select("grade, name")
            .eq("category", category)
            .not_.is_("grade", "null")
            .order("grade", desc=True)
            .execute()
        )
    except (APIError, httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("カテゴリ取得失敗: category=%s, error=%s", category, e)
        raise StoreError(f"カテゴリの取得に失敗しました: {e}") from e

    return resp.data or []
