"""Command-line interface for numerus."""

import functools
import logging
from datetime import timedelta
from typing import Annotated, Any, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from numerus.api import humanize_timedelta, resolve_key, to_ordinal_words, to_quantity, to_words
from numerus.config import configure_logging
from numerus.errors import ErrorCode, InvalidArgumentError, NumerusError
from numerus.i18n.formatter import get_resolver, no_suffix
from numerus.i18n.locale import resolve_locale
from numerus.i18n.plural import get_classifier
from numerus.i18n.protocols import GrammaticalGender, LocaleInfo, ShowQuantityAs, TimeUnit
from numerus.i18n.resources import get_resource_table
from numerus.words.registry import get_locale_words, supported_languages

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

app = typer.Typer(
    name="numerus",
    help="Spell out numbers and quantities in several languages",
    add_completion=False,
)


# =============================================================================
# Error Handling
# =============================================================================


def error_boundary(func: F) -> F:
    """Convert numerus errors into styled messages and exit codes."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except NumerusError as e:
            typer.echo(typer.style(f"Error: {e.message}", fg="red"), err=True)
            if e.hint:
                typer.echo(typer.style(f"Hint: {e.hint}", fg="yellow"), err=True)
            raise typer.Exit(e.code.value)
        except Exception as e:
            logger.exception("Unexpected error")
            typer.echo(typer.style(f"Error: {e}", fg="red"), err=True)
            raise typer.Exit(ErrorCode.GENERAL_ERROR.value)

    return wrapper  # type: ignore


def _parse_count(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise InvalidArgumentError(f"Not a number: '{text}'", argument="count") from None


# =============================================================================
# Shared Options
# =============================================================================

LocaleOpt = Annotated[
    Optional[str],
    typer.Option("--locale", "-l", help="Locale tag such as en, pt-BR or ru (default: NUMERUS_LOCALE)"),
]

GenderOpt = Annotated[
    Optional[GrammaticalGender],
    typer.Option("--gender", "-g", help="Grammatical gender for gendered languages"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Spell out numbers and quantities in several languages."""
    if verbose:
        configure_logging("DEBUG")


# =============================================================================
# Commands
# =============================================================================

# Lets "-5" through as an argument instead of an unknown option
_SIGNED_ARGS = {"ignore_unknown_options": True}



@app.command(name="words", context_settings=_SIGNED_ARGS)
@error_boundary
def words_cmd(
    number: Annotated[int, typer.Argument(help="Integer to spell out")],
    locale: LocaleOpt = None,
    gender: GenderOpt = None,
) -> None:
    """Print the cardinal words of a number."""
    typer.echo(to_words(number, gender, locale))


@app.command(name="ordinal", context_settings=_SIGNED_ARGS)
@error_boundary
def ordinal_cmd(
    number: Annotated[int, typer.Argument(help="Non-negative integer")],
    locale: LocaleOpt = None,
    gender: GenderOpt = None,
) -> None:
    """Print the ordinal words of a number."""
    typer.echo(to_ordinal_words(number, gender, locale))


@app.command(name="quantity", context_settings=_SIGNED_ARGS)
@error_boundary
def quantity_cmd(
    noun: Annotated[str, typer.Argument(help="Counted noun")],
    count: Annotated[str, typer.Argument(help="Count, may be fractional in numeric display")],
    show_as: Annotated[
        ShowQuantityAs,
        typer.Option("--as", "-a", help="How to display the count"),
    ] = ShowQuantityAs.NUMERIC,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Number format: N2, F1, C0, P0, D"),
    ] = None,
    locale: LocaleOpt = None,
) -> None:
    """Print a noun prefixed with a count ("3 cases")."""
    typer.echo(to_quantity(noun, _parse_count(count), show_as, format, locale))


@app.command(name="key", context_settings=_SIGNED_ARGS)
@error_boundary
def key_cmd(
    base_key: Annotated[str, typer.Argument(help="Template identifier")],
    count: Annotated[int, typer.Argument(help="Count the template describes")],
    locale: LocaleOpt = None,
) -> None:
    """Print the resource key matching a count."""
    typer.echo(resolve_key(base_key, count, locale))


@app.command(name="timespan", context_settings=_SIGNED_ARGS)
@error_boundary
def timespan_cmd(
    seconds: Annotated[float, typer.Argument(help="Duration in seconds")],
    precision: Annotated[
        int,
        typer.Option("--precision", "-p", help="Number of parts to show"),
    ] = 1,
    max_unit: Annotated[
        TimeUnit,
        typer.Option("--max-unit", help="Largest unit"),
    ] = TimeUnit.WEEK,
    min_unit: Annotated[
        TimeUnit,
        typer.Option("--min-unit", help="Smallest unit"),
    ] = TimeUnit.MILLISECOND,
    words: Annotated[
        bool,
        typer.Option("--words", "-w", help="Spell the counts out"),
    ] = False,
    locale: LocaleOpt = None,
) -> None:
    """Print a duration as text."""
    delta = timedelta(seconds=seconds)
    typer.echo(
        humanize_timedelta(
            delta,
            precision=precision,
            locale=locale,
            max_unit=max_unit,
            min_unit=min_unit,
            words=words,
        )
    )


@app.command(name="locales")
@error_boundary
def locales_cmd() -> None:
    """List the supported locales and their capabilities."""
    resolver = get_resolver()
    classifier = get_classifier()
    resources = set(get_resource_table().locales)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Locale", style="cyan")
    table.add_column("Cardinal", justify="center")
    table.add_column("Ordinal", justify="center")
    table.add_column("Number rule", style="white")
    table.add_column("Key suffixes", style="white")
    table.add_column("Resources", justify="center")

    for code in supported_languages():
        info = LocaleInfo.parse(code)
        words = get_locale_words(info)
        strategy = resolver.get_strategy(info)
        table.add_row(
            code,
            "yes",
            "yes" if words.ordinal is not None else "no",
            classifier.get_rule(info).classify.__name__,
            "-" if strategy is no_suffix else strategy.__name__,
            "yes" if code in resources else "fallback",
        )

    Console().print(table)
    typer.echo(f"Current locale: {resolve_locale(None).tag}")


if __name__ == "__main__":
    app()
