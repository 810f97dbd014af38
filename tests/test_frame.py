"""Tests for the Polars helpers."""

import logging

import polars as pl
import pytest

from numerus.errors import InvalidArgumentError, UnsupportedLocaleError
from numerus.frame import with_words, words_expr
from numerus.i18n.locale import locale_context
from numerus.i18n.protocols import GrammaticalGender


class TestWordsExpr:
    """Tests for words_expr."""

    def test_cardinal_with_nulls(self):
        df = pl.DataFrame({"n": [1, 21, None]})
        result = df.select(words_expr("n", locale="fr"))
        assert result["n"].to_list() == ["un", "vingt et un", None]
        assert result["n"].dtype == pl.String

    def test_ordinal(self):
        df = pl.DataFrame({"n": [1, 2, 3]})
        result = df.select(words_expr("n", ordinal=True))
        assert result["n"].to_list() == ["first", "second", "third"]

    def test_gender(self):
        df = pl.DataFrame({"n": [1, 2]})
        result = df.select(words_expr("n", locale="ru", gender=GrammaticalGender.FEMININE))
        assert result["n"].to_list() == ["одна", "две"]

    def test_gender_name_is_case_insensitive(self):
        df = pl.DataFrame({"n": [1, 2]})
        result = df.select(words_expr("n", locale="ru", gender="FEMININE"))
        assert result["n"].to_list() == ["одна", "две"]

    def test_unknown_gender(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            words_expr("n", locale="ru", gender="common")
        assert exc_info.value.argument == "gender"

    def test_locale_fixed_at_build_time(self):
        lf = pl.LazyFrame({"n": [3]})
        with locale_context("it"):
            query = lf.select(words_expr("n"))
        assert query.collect()["n"].to_list() == ["tre"]

    def test_unsupported_locale(self):
        with pytest.raises(UnsupportedLocaleError):
            words_expr("n", locale="de")


class TestWithWords:
    """Tests for with_words."""

    def test_adds_columns(self):
        df = pl.DataFrame({"a": [1, 2], "b": [10, 20], "c": ["x", "y"]})
        result = with_words(df, ["a", "b"])
        assert result.columns == ["a", "b", "c", "a_words", "b_words"]
        assert result["b_words"].to_list() == ["ten", "twenty"]

    def test_lazy_frame(self):
        lf = pl.LazyFrame({"n": [100]})
        result = with_words(lf, ["n"], locale="nl")
        assert isinstance(result, pl.DataFrame)
        assert result["n_words"].to_list() == ["honderd"]

    def test_ordinal_and_suffix(self):
        df = pl.DataFrame({"rank": [1, 2]})
        result = with_words(df, ["rank"], ordinal=True, suffix="_ord")
        assert result["rank_ord"].to_list() == ["first", "second"]

    def test_missing_column_skipped(self, caplog):
        df = pl.DataFrame({"n": [1]})
        with caplog.at_level(logging.WARNING, logger="numerus.frame"):
            result = with_words(df, ["missing"])
        assert result.columns == ["n"]
        assert "missing" in caplog.text
