"""CLI command: selectorkit build -- assemble a selector from fragment tokens."""

from __future__ import annotations

import logging
import sys

import click

from selectorkit.config import SelectorkitConfig
from selectorkit.errors import SelectorError
from selectorkit.selector import COMBINATORS, Selector, SelectorBuilder

# Token kind -> Selector method name.
_FRAGMENT_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def _split_segments(tokens: tuple[str, ...]) -> tuple[list[list[str]], list[str]]:
    """Split tokens into fragment segments and the combinators between them."""
    segments: list[list[str]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        if token in COMBINATORS:
            combinators.append(token)
            segments.append([])
        else:
            segments[-1].append(token)
    if any(not segment for segment in segments):
        raise click.UsageError("Each combinator must sit between two selectors.")
    return segments, combinators


def _build_segment(tokens: list[str]) -> Selector:
    selector = Selector()
    for token in tokens:
        kind, sep, value = token.partition(":")
        if not sep or kind not in _FRAGMENT_METHODS:
            raise click.BadParameter(
                f"{token!r} is not KIND:VALUE with KIND one of "
                f"{', '.join(_FRAGMENT_METHODS)}",
                param_hint="TOKENS",
            )
        getattr(selector, _FRAGMENT_METHODS[kind])(value)
    return selector


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--verbose", "-v", is_flag=True, help="Log every fragment appended")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (--verbose forces DEBUG)",
)
def build(tokens: tuple[str, ...], verbose: bool, log_level: str) -> None:
    """Build a CSS selector from TOKENS and print it.

    Fragment tokens are KIND:VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) and are applied in the order given.  The tokens ' ', '+',
    '~' and '>' combine the selectors on either side.

    Example: selectorkit build element:div id:main + element:table
    """
    config = SelectorkitConfig(log_level="DEBUG" if verbose else log_level.upper())
    logging.basicConfig(level=config.log_level)
    logging.getLogger("selectorkit").setLevel(config.log_level)
    builder = SelectorBuilder(config=config)

    segments, combinators = _split_segments(tokens)
    try:
        selectors = [_build_segment(segment) for segment in segments]
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    result = selectors[-1]
    for left, combinator in zip(reversed(selectors[:-1]), reversed(combinators)):
        result = builder.combine(left, combinator, result)

    click.echo(builder.stringify(result))
