"""テスト共通フィクスチャ."""

from __future__ import annotations

import fnmatch

import pytest

from resultlookup.errors import StoreError


class FakeStore:
    """メモリ上の結果ストア. 呼び出しを記録する."""

    def __init__(self, rows: list[dict] | None = None) -> None:
        self.rows = rows or []
        self.calls: list[tuple] = []
        self.fail_search = False
        self.fail_search_on_call: int | None = None  # n 回目（1始まり）の検索だけ失敗させる
        self.category_error: Exception | None = None
        self.fail_category = False

    def search_by_name(self, pattern: str, limit: int = 1) -> list[dict]:
        self.calls.append(("search_by_name", pattern, limit))
        if self.fail_search or self.fail_search_on_call == len(self.patterns()):
            raise StoreError("search failed")
        glob = pattern.replace("%", "*").lower()
        hits = [r for r in self.rows if fnmatch.fnmatchcase(r["name"].lower(), glob)]
        return hits[:limit]

    def get_graded_in_category(self, category: int) -> list[dict]:
        self.calls.append(("get_graded_in_category", category))
        if self.fail_category:
            raise StoreError("category failed")
        if self.category_error is not None:
            raise self.category_error
        graded = [r for r in self.rows if r.get("category") == category and r.get("grade") is not None]
        # sorted は安定ソートなので同点は登録順のまま
        return [
            {"grade": r["grade"], "name": r["name"]}
            for r in sorted(graded, key=lambda r: r["grade"], reverse=True)
        ]

    def patterns(self) -> list[str]:
        return [c[1] for c in self.calls if c[0] == "search_by_name"]


def make_row(name: str, no: int, category: int | None = 5, grade: float | None = None, rank=None) -> dict:
    return {"name": name, "no": no, "category": category, "grade": grade, "rank": rank}


@pytest.fixture
def store() -> FakeStore:
    return FakeStore([
        make_row("Mona Hassan Ibrahim", 1, category=5, grade=95),
        make_row("Ahmed Mohamed Ali", 2, category=5, grade=90),
        make_row("Sara  Ahmed", 3, category=5, grade=80),
        make_row("Omar Khaled", 4, category=6, grade=70),
        make_row("Youssef Adel", 5, category=5, grade=None),
        make_row("Nour Samir", 6, category=None, grade=88),
    ])
