"""検索語の正規化."""

from __future__ import annotations

from resultlookup.errors import ValidationError

MIN_NAME_TOKENS = 2


def clean_term(raw_term: str) -> str:
    """前後の空白を除去する. 語間の空白はそのまま残す."""
    return raw_term.strip()


def tokenize(raw_term: str) -> list[str]:
    return raw_term.split()


def is_searchable(raw_term: str) -> bool:
    """検索を実行できる語か（氏名トークンが 2 つ以上）."""
    return len(tokenize(raw_term)) >= MIN_NAME_TOKENS


def normalize(raw_term: str) -> list[str]:
    """検索語を氏名トークンのリストに分割する.

    Raises:
        ValidationError: トークンが 2 つ未満の場合
    """
    tokens = tokenize(clean_term(raw_term))
    if len(tokens) < MIN_NAME_TOKENS:
        raise ValidationError()
    return tokens
