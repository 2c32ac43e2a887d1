"""CLI for parensearch.

Usage:
    python -m parensearch search                          # Default expression and target
    python -m parensearch search --target 141             # Different target
    python -m parensearch search --expr "2 + 3 * 4" -t 20 # Different expression
    python -m parensearch search --details --json out.json
    python -m parensearch eval "2 + 3 * 4"                # Evaluate without parentheses
    python -m parensearch ranges "1 + 2 * 3"              # Every candidate range
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from parensearch.config import load_config
from parensearch.errors import ConfigError, EvaluationError, TokenizeError
from parensearch.evaluator import evaluate_strict
from parensearch.report import format_report, render_match_table, render_ranges_table, run_search
from parensearch.tokenizer import tokenize

app = typer.Typer(
    name="parensearch",
    help="Find where one pair of parentheses makes an expression hit a target",
    no_args_is_help=True,
)
console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Find where one pair of parentheses makes an expression hit a target."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command("search")
def cmd_search(
    expr: Optional[str] = typer.Option(None, "--expr", "-e", help="Expression, e.g. '1 + 2 * 3'"),
    target: Optional[int] = typer.Option(None, "--target", "-t", help="Value the expression must reach"),
    strict: bool = typer.Option(False, "--strict", help="Fail on unrecognized tokens instead of dropping them"),
    details: bool = typer.Option(False, "--details", "-d", help="Show a table of matching ranges"),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Also write the report as JSON"),
) -> None:
    """Search every single-pair parenthesization for the target value."""
    try:
        config = load_config(expression=expr, target=target)
        report = run_search(config.expression, config.target, strict=strict)
    except (ConfigError, TokenizeError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    for line in format_report(report):
        typer.echo(line)

    if details and report.found:
        render_match_table(report, console)

    if json_path:
        report.save(json_path)
        console.print(f"Report written to {json_path}")


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '2 + 3 * 4'"),
    strict: bool = typer.Option(False, "--strict", help="Fail on unrecognized tokens instead of dropping them"),
) -> None:
    """Evaluate an expression without parentheses."""
    try:
        value = evaluate_strict(tokenize(expression, strict=strict))
    except (TokenizeError, EvaluationError) as e:
        console.print(f"[red]Malformed expression:[/red] {e}")
        raise typer.Exit(1)
    typer.echo(str(value))


@app.command("ranges")
def cmd_ranges(
    expression: str = typer.Argument(help="Expression, e.g. '1 + 2 * 3'"),
    target: Optional[int] = typer.Option(None, "--target", "-t", help="Highlight ranges reaching this value"),
) -> None:
    """List every candidate range and the value it produces."""
    tokens = tokenize(expression)
    if not tokens:
        console.print("[yellow]No tokens in expression.[/yellow]")
        raise typer.Exit(1)
    render_ranges_table(tokens, console, target=target)


if __name__ == "__main__":
    app()
