"""normalizer モジュールのユニットテスト."""

import pytest

from resultlookup.errors import NAME_TOKENS_REQUIRED_MESSAGE, ValidationError
from resultlookup.normalizer import clean_term, is_searchable, normalize


class TestNormalize:
    """normalize のテスト."""

    def test_two_tokens(self):
        assert normalize("Sara Ahmed") == ["Sara", "Ahmed"]

    def test_strips_and_squashes_whitespace(self):
        """前後の空白・連続空白・タブを除いて分割すること."""
        assert normalize("  Ahmed \t  Mohamed   Ali \n") == ["Ahmed", "Mohamed", "Ali"]

    def test_single_token(self):
        with pytest.raises(ValidationError) as exc:
            normalize("X")
        assert str(exc.value) == NAME_TOKENS_REQUIRED_MESSAGE

    def test_empty(self):
        with pytest.raises(ValidationError):
            normalize("   ")


class TestCleanTerm:
    """clean_term のテスト."""

    def test_keeps_inner_spaces(self):
        assert clean_term("  Ahmed   Ali ") == "Ahmed   Ali"


class TestIsSearchable:
    """is_searchable のテスト."""

    def test_searchable(self):
        assert is_searchable(" Sara  Ahmed ")

    def test_not_searchable(self):
        assert not is_searchable("Sara")
        assert not is_searchable("")
