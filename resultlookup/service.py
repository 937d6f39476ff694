"""検索サービス — 正規化 → マッチング → 順位算出."""

from __future__ import annotations

import logging

from resultlookup import db
from resultlookup.db import RecordStore
from resultlookup.matcher import find_best_match
from resultlookup.models import RankedResult, ResultRecord
from resultlookup.normalizer import clean_term, normalize
from resultlookup.ranking import compute_rank

logger = logging.getLogger(__name__)


class ResultLookupService:
    """氏名から試験結果を 1 件検索し、カテゴリ内順位を付与する.

    ストアへの問い合わせは逐次実行（部分一致 → フォールバック → 順位）。
    """

    def __init__(self, store: RecordStore | None = None) -> None:
        self.store = store if store is not None else db

    def search(self, term: str) -> RankedResult | None:
        """検索語に一致する結果を返す.

        Raises:
            ValidationError: 氏名トークンが 2 つ未満（ストアには問い合わせない）
            StoreError: 検索中のストアエラー
        """
        tokens = normalize(term)
        cleaned = clean_term(term)

        record = find_best_match(self.store, tokens, cleaned)
        if record is None:
            logger.info("該当なし: term=%s", cleaned)
            return None

        result = self.rank(record)
        logger.info("検索結果: no=%s, category=%s, rank=%s",
                    result.entry_number, result.category, result.computed_rank)
        return result

    def rank(self, result: ResultRecord) -> RankedResult:
        """順位を付与する. 順位が算出できなくても例外は投げない."""
        return RankedResult.from_record(result, compute_rank(self.store, result))
