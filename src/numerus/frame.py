"""Polars helpers for spelling out integer columns."""

from __future__ import annotations

import logging

import polars as pl

from numerus.i18n.locale import resolve_locale
from numerus.i18n.protocols import GrammaticalGender, LocaleInfo
from numerus.words.registry import coerce_gender, get_cardinal_converter, get_ordinalizer

logger = logging.getLogger(__name__)


def words_expr(
    column: str,
    locale: str | LocaleInfo | None = None,
    gender: GrammaticalGender | str | None = None,
    ordinal: bool = False,
) -> pl.Expr:
    """Expression mapping an integer column to its words.

    The locale is resolved when the expression is built, so a lazy query
    keeps the locale that was current at that point. Nulls stay null.

    Example:
        >>> df = pl.DataFrame({"n": [1, 21, None]})
        >>> df.select(words_expr("n", locale="fr"))["n"].to_list()
        ['un', 'vingt et un', None]
    """
    info = resolve_locale(locale)
    gender = coerce_gender(gender)
    converter = get_ordinalizer(info) if ordinal else get_cardinal_converter(info)

    def spell(value: int) -> str:
        return converter.convert(value, gender)

    return pl.col(column).map_elements(spell, return_dtype=pl.String)


def with_words(
    frame: pl.DataFrame | pl.LazyFrame,
    columns: list[str],
    locale: str | LocaleInfo | None = None,
    ordinal: bool = False,
    suffix: str = "_words",
) -> pl.DataFrame:
    """Add a words column next to each integer column.

    Args:
        frame: DataFrame or LazyFrame
        columns: Integer columns to spell out
        locale: Target locale (default: ambient locale)
        ordinal: Produce ordinal instead of cardinal words
        suffix: Appended to each column name for the new column

    Returns:
        Polars DataFrame with the added columns.
    """
    df = frame.collect() if isinstance(frame, pl.LazyFrame) else frame

    exprs = []
    for col in columns:
        if col not in df.columns:
            logger.warning(f"Column {col!r} not found, skipping")
            continue
        exprs.append(words_expr(col, locale, ordinal=ordinal).alias(f"{col}{suffix}"))

    if not exprs:
        return df
    return df.with_columns(exprs)
