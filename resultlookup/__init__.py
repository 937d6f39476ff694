"""試験結果の氏名検索・順位算出パッケージ."""
