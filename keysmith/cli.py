"""
Keysmith CLI
=============

Click-based command-line interface for the Keysmith password and PIN
generator.

Usage::

    keysmith normal --length 16 --numbers --symbols
    keysmith --analyze normal
    keysmith --seed 42 pin --length 6
    keysmith --copy --output json normal -n

Global options (``--analyze``, ``--copy``, ``--seed``, ...) must come
before the subcommand.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import tomllib
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import click

from shared.config import KeysmithConfig
from shared.console import KeysmithConsole

from keysmith import __version__
from keysmith.core.engine import KeysmithEngine
from keysmith.core.errors import KeysmithError, LengthValidationError
from keysmith.core.models import GeneratedSecret
from keysmith.generators.random_source import MAX_SEED
from keysmith.output.console import KeysmithConsoleOutput
from keysmith.output.report import KeysmithReportGenerator
from keysmith.parsers.length_parser import parse_password_length, parse_pin_length


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _length_option(parser: Callable[[str], int]):
    """Click callback validating a length token with *parser*."""

    def callback(
        ctx: click.Context, param: click.Parameter, value: Optional[str]
    ) -> Optional[int]:
        if value is None:
            return None
        try:
            return parser(value)
        except LengthValidationError as exc:
            raise click.BadParameter(exc.message, ctx=ctx, param=param) from exc

    return callback


@contextmanager
def _fatal_errors(ctx: click.Context) -> Iterator[None]:
    """Report Keysmith errors on stderr and exit with status 1."""
    try:
        yield
    except KeysmithError as exc:
        ctx.obj["engine"].logger.debug(f"{type(exc).__name__}: {exc}")
        ctx.obj["error_console"].error(str(exc))
        ctx.exit(1)


def _handle_output(ctx: click.Context, secret: GeneratedSecret) -> None:
    """Copy, analyse, and print *secret* according to the global options."""
    engine: KeysmithEngine = ctx.obj["engine"]

    if ctx.obj["copy"]:
        engine.copy(secret)

    report = engine.analyze(secret) if ctx.obj["analyze"] else None

    if ctx.obj["output_format"] == "json":
        reporter: KeysmithReportGenerator = ctx.obj["reporter"]
        click.echo(reporter.to_json(secret, report))
        return

    display: KeysmithConsoleOutput = ctx.obj["display"]
    if report is not None:
        display.display_report(secret, report)
    else:
        display.display_secret(secret)


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="keysmith")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Keysmith configuration file (TOML).",
)
@click.option(
    "--analyze",
    is_flag=True,
    default=False,
    help="Print a strength report instead of the raw secret.",
)
@click.option(
    "--copy", "copy_",
    is_flag=True,
    default=False,
    help="Copy the generated secret to the system clipboard.",
)
@click.option(
    "--seed",
    type=click.IntRange(0, MAX_SEED),
    default=None,
    help="Seed the random source for reproducible output.",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (default from config: console).",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log debug information to stderr.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    analyze: bool,
    copy_: bool,
    seed: Optional[int],
    output: Optional[str],
    verbose: bool,
) -> None:
    """Keysmith -- a simple and lightweight password generator.

    Generate random passwords and PIN numbers, optionally with a
    strength analysis report.
    """
    ctx.ensure_object(dict)

    try:
        keysmith_config = KeysmithConfig.load(config)
    except tomllib.TOMLDecodeError as exc:
        raise click.BadParameter(
            f"invalid TOML: {exc}", ctx=ctx, param_hint="'--config'"
        ) from exc
    if verbose:
        keysmith_config.global_settings.log_level = "DEBUG"
    if output is not None:
        keysmith_config.output.format = output

    ctx.obj["config"] = keysmith_config
    ctx.obj["analyze"] = analyze
    ctx.obj["copy"] = copy_
    ctx.obj["output_format"] = keysmith_config.output.format

    ctx.obj["engine"] = KeysmithEngine(keysmith_config, seed=seed)
    ctx.obj["display"] = KeysmithConsoleOutput(KeysmithConsole())
    ctx.obj["error_console"] = KeysmithConsole(stderr=True)
    ctx.obj["reporter"] = KeysmithReportGenerator()


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.option(
    "--length", "-l",
    type=str,
    default=None,
    callback=_length_option(parse_password_length),
    metavar="8-100",
    help="Password length, 8-100 (default from config: 12).",
)
@click.option("--numbers", "-n", is_flag=True, default=False, help="Include digits.")
@click.option("--symbols", "-s", is_flag=True, default=False, help="Include symbols.")
@click.option(
    "--require-each-class",
    is_flag=True,
    default=False,
    help="Guarantee at least one character from every enabled class.",
)
@click.pass_context
def normal(
    ctx: click.Context,
    length: Optional[int],
    numbers: bool,
    symbols: bool,
    require_each_class: bool,
) -> None:
    """Generate a random password with specified complexity.

    Letters are always used; digits and symbols can be added to
    increase password complexity.
    """
    engine: KeysmithEngine = ctx.obj["engine"]

    with _fatal_errors(ctx):
        policy = engine.password_policy(length, numbers, symbols, require_each_class)
        secret = engine.generate_password(policy)
        _handle_output(ctx, secret)


@cli.command()
@click.option(
    "--length", "-l",
    type=str,
    default=None,
    callback=_length_option(parse_pin_length),
    metavar="4-12",
    help="PIN length, 4-12 (default from config: 4).",
)
@click.pass_context
def pin(ctx: click.Context, length: Optional[int]) -> None:
    """Generate a random PIN number."""
    engine: KeysmithEngine = ctx.obj["engine"]

    with _fatal_errors(ctx):
        secret = engine.generate_pin(engine.pin_policy(length))
        _handle_output(ctx, secret)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Keysmith CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
