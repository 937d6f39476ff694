"""検索状態から表示状態を選択する."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from resultlookup.config import PASS_GRADE
from resultlookup.errors import ValidationError
from resultlookup.models import RankedResult
from resultlookup.orchestrator import SearchSnapshot, SearchState

UNEXPECTED_ERROR_MESSAGE = "an unexpected error occurred"
NO_RESULTS_MESSAGE = "no results found; check the first and second names"
INITIAL_MESSAGE = "enter at least the first and second names to search"
UNKNOWN_NAME = "unknown"


class DisplayState(Enum):
    INITIAL = "initial"
    LOADING = "loading"
    ERROR = "error"
    NO_RESULTS = "no_results"
    RESULT = "result"


@dataclass(frozen=True)
class View:
    state: DisplayState
    message: str = ""
    result: RankedResult | None = None


def select_view(snapshot: SearchSnapshot) -> View:
    """SearchSnapshot に対応する表示状態を返す.

    エラーは入力不足（ValidationError）のみメッセージをそのまま表示し、
    それ以外は汎用メッセージにする。
    """
    if not snapshot.requested:
        return View(DisplayState.INITIAL, f"{INITIAL_MESSAGE} (pass mark: {PASS_GRADE:g}+)")

    if snapshot.state is SearchState.SEARCHING:
        return View(DisplayState.LOADING)

    if snapshot.state is SearchState.FAILED:
        if isinstance(snapshot.error, ValidationError):
            return View(DisplayState.ERROR, snapshot.error.message)
        return View(DisplayState.ERROR, UNEXPECTED_ERROR_MESSAGE)

    if snapshot.state is SearchState.SUCCEEDED:
        if snapshot.result is None:
            return View(DisplayState.NO_RESULTS, NO_RESULTS_MESSAGE)
        return View(DisplayState.RESULT, result=snapshot.result)

    # 要求済みだが検索語が空
    return View(DisplayState.INITIAL, INITIAL_MESSAGE)


def render_text(view: View) -> str:
    """CLI 向けのテキスト表示."""
    if view.state is DisplayState.LOADING:
        return "searching..."
    if view.state is not DisplayState.RESULT or view.result is None:
        return view.message

    r = view.result
    lines = [
        f"name:     {r.name or UNKNOWN_NAME}",
        f"no:       {r.entry_number}",
        f"grade:    {r.grade if r.grade is not None else 0:g}",
    ]
    if r.category is not None:
        lines.append(f"category: {r.category}")
    if r.display_rank is not None:
        lines.append(f"rank:     {r.display_rank}")
    if r.passed is not None:
        lines.append(f"passed:   {'yes' if r.passed else 'no'}")
    return "\n".join(lines)
