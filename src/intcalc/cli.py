"""intcalc command-line interface."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

import click

from intcalc import __version__
from intcalc.ast_nodes import BinaryOp, Constant, Expr, Square, walk
from intcalc.calculator import calculate
from intcalc.config import CalcConfig, discover_config, load_config
from intcalc.errors import CalcError, DiagnosticRenderer
from intcalc.lexer import Lexer
from intcalc.parser import Parser
from intcalc.tokens import Token

_FILENAME = "<expr>"


def _engine_options(func: Callable) -> Callable:
    """Options shared by every command that lexes an expression."""
    func = click.option("--no-color", is_flag=True, help="Disable colored diagnostics.")(func)
    func = click.option(
        "--config", "config_path", type=click.Path(exists=True, dir_okay=False),
        default=None, help="Read settings from this intcalc.toml.",
    )(func)
    func = click.option(
        "--bits", type=click.IntRange(min=0), default=None,
        help="Signed integer width; 0 means unbounded.",
    )(func)
    func = click.option(
        "--strict", is_flag=True, help="Reject characters the lexer does not know.",
    )(func)
    func = click.option("--stdin", "use_stdin", is_flag=True, help="Read the expression from stdin.")(func)
    func = click.argument("expression", required=False)(func)
    return func


def _resolve_config(config_path: str | None, bits: int | None, strict: bool) -> CalcConfig:
    try:
        config = load_config(Path(config_path)) if config_path else discover_config()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--config' / intcalc.toml") from e
    if bits is not None:
        config.arithmetic.bits = bits
    if strict:
        config.lexer.strict = True
    return config


def _read_expression(expression: str | None, use_stdin: bool) -> str:
    if use_stdin:
        return sys.stdin.read()
    if expression is None:
        raise click.UsageError("missing EXPRESSION (or pass --stdin)")
    return expression


def _report(error: CalcError, text: str, config: CalcConfig, no_color: bool) -> NoReturn:
    renderer = DiagnosticRenderer(color=config.output.color and not no_color)
    renderer.add_source(_FILENAME, text)
    click.echo(renderer.render(error.to_diagnostic()), err=True)
    raise SystemExit(1)


def _lex(text: str, config: CalcConfig) -> list[Token]:
    return Lexer(
        text, _FILENAME,
        strict=config.lexer.strict,
        int_range=config.arithmetic.int_range,
    ).lex()


def _parse(text: str, config: CalcConfig) -> Expr:
    tokens = _lex(text, config)
    return Parser(tokens, _FILENAME, max_depth=config.parser.max_depth).parse()


@click.group()
@click.version_option(__version__, prog_name="intcalc")
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline steps to stderr.")
def main(verbose: bool) -> None:
    """Integer arithmetic expression calculator."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command(name="eval")
@_engine_options
def eval_cmd(
    expression: str | None, use_stdin: bool, strict: bool, bits: int | None,
    config_path: str | None, no_color: bool,
) -> None:
    """Evaluate an expression and print the integer result."""
    config = _resolve_config(config_path, bits, strict)
    text = _read_expression(expression, use_stdin)
    try:
        value = calculate(text, config=config, filename=_FILENAME)
    except CalcError as e:
        _report(e, text, config, no_color)
    click.echo(value)


@main.command()
@_engine_options
def tokens(
    expression: str | None, use_stdin: bool, strict: bool, bits: int | None,
    config_path: str | None, no_color: bool,
) -> None:
    """Print the token stream of an expression."""
    config = _resolve_config(config_path, bits, strict)
    text = _read_expression(expression, use_stdin)
    try:
        toks = _lex(text, config)
    except CalcError as e:
        _report(e, text, config, no_color)
    for tok in toks:
        span = tok.span
        click.echo(f"{tok.kind.name:<8} {tok.value!r} @{span.start_line}:{span.start_col}")


@main.command()
@_engine_options
def view(
    expression: str | None, use_stdin: bool, strict: bool, bits: int | None,
    config_path: str | None, no_color: bool,
) -> None:
    """View the AST of an expression."""
    config = _resolve_config(config_path, bits, strict)
    text = _read_expression(expression, use_stdin)
    try:
        expr = _parse(text, config)
    except CalcError as e:
        _report(e, text, config, no_color)
    _dump_ast(expr)


@main.command(name="format")
@_engine_options
@click.option("--check", is_flag=True, help="Exit 1 if the expression is not canonical.")
def format_cmd(
    expression: str | None, use_stdin: bool, strict: bool, bits: int | None,
    config_path: str | None, no_color: bool, check: bool,
) -> None:
    """Print an expression in canonical form."""
    from intcalc.formatter import CalcFormatter

    config = _resolve_config(config_path, bits, strict)
    text = _read_expression(expression, use_stdin)
    try:
        expr = _parse(text, config)
    except CalcError as e:
        _report(e, text, config, no_color)
    formatted = CalcFormatter().format(expr)
    if check:
        if formatted != text.strip():
            click.echo(f"would reformat: {formatted}")
            raise SystemExit(1)
        return
    click.echo(formatted)


@main.command()
@click.argument("expression", required=False)
@click.option("--stdin", "use_stdin", is_flag=True, help="Read the expression from stdin.")
def highlight(expression: str | None, use_stdin: bool) -> None:
    """Print an expression with terminal syntax highlighting."""
    from pygments import highlight as pygments_highlight
    from pygments.formatters import TerminalFormatter

    from intcalc.highlight import CalcLexer

    text = _read_expression(expression, use_stdin)
    click.echo(pygments_highlight(text, CalcLexer(), TerminalFormatter()), nl=False)


def _dump_ast(expr: Expr) -> None:
    """Print a readable AST dump."""
    for node, depth in walk(expr):
        indent = "  " * depth
        if isinstance(node, Constant):
            click.echo(f"{indent}Constant {node.value}")
        elif isinstance(node, BinaryOp):
            click.echo(f"{indent}BinaryOp {node.kind.name} ({node.kind.symbol})")
        elif isinstance(node, Square):
            click.echo(f"{indent}Square")
