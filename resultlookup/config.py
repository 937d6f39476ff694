"""設定モジュール — 環境変数・定数定義."""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env はプロジェクトルートに配置
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# --- Supabase ---
# 未設定でも import は通す。クライアント生成時に検証する (db._get_client)
SUPABASE_URL: str = os.environ.get("SUPABASE_URL", "")
SUPABASE_KEY: str = os.environ.get("SUPABASE_KEY", "")
RESULTS_TABLE: str = os.environ.get("RESULTS_TABLE", "results")

# --- リクエスト設定 ---
REQUEST_TIMEOUT = int(os.environ.get("REQUEST_TIMEOUT", "15"))  # 秒

# --- 判定 ---
PASS_GRADE = float(os.environ.get("PASS_GRADE", "85"))  # 合格ライン（以上）

# --- ログ ---
LOG_DIR = Path(os.environ.get("LOG_DIR", _PROJECT_ROOT / "logs"))
