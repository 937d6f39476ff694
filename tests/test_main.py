"""main モジュールのテスト."""

from unittest.mock import patch

from click.testing import CliRunner

from resultlookup import main
from resultlookup.service import ResultLookupService


class TestRun:
    """run コマンドのテスト."""

    def _invoke(self, store, args, tmp_path):
        with patch("resultlookup.main.LOG_DIR", tmp_path), \
                patch("resultlookup.main.logging.basicConfig"), \
                patch("resultlookup.orchestrator.ResultLookupService",
                      lambda: ResultLookupService(store)):
            return CliRunner().invoke(main.run, args)

    def test_result(self, store, tmp_path):
        result = self._invoke(store, ["Ahmed", "Mohamed"], tmp_path)

        assert result.exit_code == 0
        assert "no:       2" in result.output
        assert "rank:     2" in result.output

    def test_validation_error(self, store, tmp_path):
        result = self._invoke(store, ["X"], tmp_path)

        assert result.exit_code == 1
        assert "at least two name tokens required" in result.output
        assert store.calls == []

    def test_no_results(self, store, tmp_path):
        result = self._invoke(store, ["Zeina", "Fathy"], tmp_path)

        assert result.exit_code == 0
        assert "no results found" in result.output

    def test_store_error_generic_message(self, store, tmp_path):
        store.fail_search = True
        result = self._invoke(store, ["Sara", "Ahmed"], tmp_path)

        assert result.exit_code == 1
        assert "an unexpected error occurred" in result.output

    def test_name_required(self, store, tmp_path):
        result = self._invoke(store, [], tmp_path)

        assert result.exit_code == 2
        assert store.calls == []
