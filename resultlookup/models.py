"""データモデル定義."""

from dataclasses import dataclass

from resultlookup.config import PASS_GRADE


@dataclass(frozen=True)
class ResultRecord:
    """results テーブルの 1 行を表す（取得後は不変）."""

    name: str  # 氏名
    entry_number: int  # 受験番号 (no カラム)。レコードの識別子
    category: int | None = None  # 順位計算のグループキー
    grade: float | None = None  # 得点
    stored_rank: int | None = None  # DB に保存済みの順位 (rank カラム)

    @classmethod
    def from_row(cls, row: dict) -> "ResultRecord":
        """Supabase のレスポンス行から生成する.

        no カラムは必須（識別子）。欠けている行は KeyError になる。
        """
        return cls(
            name=row.get("name") or "",
            entry_number=row["no"],
            category=row.get("category"),
            grade=row.get("grade"),
            stored_rank=row.get("rank"),
        )


@dataclass(frozen=True)
class RankedResult(ResultRecord):
    """算出順位付きの検索結果. 永続化はしない."""

    computed_rank: int | None = None  # None = 算出不可

    @classmethod
    def from_record(cls, record: ResultRecord, computed_rank: int | None) -> "RankedResult":
        return cls(
            name=record.name,
            entry_number=record.entry_number,
            category=record.category,
            grade=record.grade,
            stored_rank=record.stored_rank,
            computed_rank=computed_rank,
        )

    @property
    def display_rank(self) -> int | None:
        """表示用の順位. 算出順位が無ければ保存済みの順位を使う."""
        if self.computed_rank is not None:
            return self.computed_rank
        return self.stored_rank

    @property
    def passed(self) -> bool | None:
        """合格ライン以上か. 得点が無ければ None."""
        if self.grade is None:
            return None
        return self.grade >= PASS_GRADE
