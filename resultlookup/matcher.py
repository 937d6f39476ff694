"""氏名の 2 段階マッチング.

検索戦略:
  1. 検索語そのものを部分一致（ILIKE）で検索（主戦略）
  2. トークンを % で連結したパターンで検索（フォールバック）
     ミドルネームの省略や空白の揺れを吸収する
"""

from __future__ import annotations

import logging

from resultlookup.db import RecordStore
from resultlookup.models import ResultRecord

logger = logging.getLogger(__name__)


def exact_pattern(term: str) -> str:
    return f"%{term}%"


def wildcard_pattern(tokens: list[str]) -> str:
    """["sara", "ahmed"] -> "%sara%ahmed%"."""
    return f"%{'%'.join(tokens)}%"


def find_best_match(
    store: RecordStore, tokens: list[str], term: str
) -> ResultRecord | None:
    """検索語に最も合う 1 件を返す.

    Args:
        store: 結果ストア
        tokens: normalize() 済みの氏名トークン
        term: 前後の空白を除去した検索語

    Returns:
        一致したレコード。見つからなければ None。

    Raises:
        StoreError: いずれかの検索でストアエラーが発生した場合
    """
    rows = store.search_by_name(exact_pattern(term), limit=1)
    if rows:
        return ResultRecord.from_row(rows[0])

    if " " not in term:
        return None

    logger.info("部分一致なし。トークン連結パターンにフォールバック: term=%s", term)
    rows = store.search_by_name(wildcard_pattern(tokens), limit=1)
    if rows:
        return ResultRecord.from_row(rows[0])

    return None
