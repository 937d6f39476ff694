"""カテゴリ内順位の算出."""

from __future__ import annotations

import logging

from resultlookup.db import RecordStore
from resultlookup.models import ResultRecord

logger = logging.getLogger(__name__)


def find_name_position(rows: list[dict], name: str) -> int | None:
    """得点降順のリストから氏名が完全一致する最初の位置を返す.

    Returns:
        順位（1始まり）。見つからなければ None。
    """
    for i, row in enumerate(rows, start=1):
        if row.get("name") == name:
            return i
    return None


def compute_rank(store: RecordStore, record: ResultRecord) -> int | None:
    """同一カテゴリ内での得点順位を算出する.

    順位はベストエフォート。ストアエラー時も例外は投げず None を返す。

    Returns:
        順位（1始まり）。カテゴリ・得点が無い場合や算出できない場合は None。
    """
    if record.category is None or record.grade is None:
        return None

    try:
        rows = store.get_graded_in_category(record.category)
    except Exception:
        logger.exception("順位算出失敗: no=%s, category=%s",
                         record.entry_number, record.category)
        return None

    rank = find_name_position(rows, record.name)
    if rank is None:
        logger.warning("カテゴリ内に同名レコードなし: no=%s, category=%s",
                       record.entry_number, record.category)
    return rank
