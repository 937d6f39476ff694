"""試験結果検索 — CLI エントリーポイント.

処理フロー:
  1. 引数の氏名を検索要求として受け付ける
  2. 部分一致 → トークン連結パターンの順に 1 件を検索
  3. 見つかればカテゴリ内順位を算出
  4. 表示状態（結果・該当なし・エラー）を出力
"""

from __future__ import annotations

import logging
import sys
import time
from datetime import datetime

import click

from resultlookup.config import LOG_DIR
from resultlookup.orchestrator import SearchOrchestrator
from resultlookup.views import DisplayState, render_text, select_view


def setup_logging(verbose: bool = False) -> None:
    """ロギングの初期設定."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / f"lookup_{datetime.now().strftime('%Y%m%d')}.log"
    # 標準出力は結果表示に使うため、ログは stderr に出す
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def lookup(term: str) -> int:
    """検索を実行して表示する. 終了コードを返す."""
    logger = logging.getLogger(__name__)
    logger.info("=== 検索 開始: term=%s ===", term)
    start_time = time.time()

    orchestrator = SearchOrchestrator()
    snapshot = orchestrator.submit(term)
    view = select_view(snapshot)
    click.echo(render_text(view))

    elapsed = time.time() - start_time
    logger.info("=== 検索 完了: state=%s, 所要時間: %.1f 秒 ===", view.state.value, elapsed)
    if view.state is DisplayState.ERROR:
        logger.error("検索失敗: %s", snapshot.error)
        return 1
    return 0


@click.command()
@click.argument("name", nargs=-1, required=True)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
def run(name: tuple[str, ...], verbose: bool):
    """
    Look up an exam result by full name (first and second names at least).

    Example:
        python -m resultlookup.main Sara Ahmed
    """
    setup_logging(verbose)
    sys.exit(lookup(" ".join(name)))


if __name__ == "__main__":
    run()
