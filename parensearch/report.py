"""Run a search and present the results.

format_report() produces the plain result lines written to stdout;
render_match_table() and render_ranges_table() draw Rich tables for the
detailed views.
"""

from __future__ import annotations

import logging
from typing import Sequence

from rich.console import Console
from rich.table import Table

from parensearch.enumerator import candidate_ranges, evaluate_with_parentheses, search
from parensearch.evaluator import evaluate_expression
from parensearch.models import SearchReport, Token
from parensearch.renderer import insert_parentheses
from parensearch.tokenizer import tokenize

logger = logging.getLogger(__name__)


def run_search(expression: str, target: int, strict: bool = False) -> SearchReport:
    """Tokenize expression once and search it for target.

    Raises:
        TokenizeError: strict is set and the expression has an unknown piece.
    """
    tokens = tokenize(expression, strict=strict)
    base_value = evaluate_expression(tokens)
    if base_value is None:
        logger.warning("Expression %r does not evaluate without parentheses", expression)

    candidates = sum(1 for _ in candidate_ranges(tokens))
    matches = search(tokens, target)
    logger.info("Examined %d candidate ranges, %d matched %d", candidates, len(matches), target)

    return SearchReport(
        expression=expression,
        target=target,
        base_value=base_value,
        candidates=candidates,
        matches=matches,
    )


def format_report(report: SearchReport) -> list[str]:
    """Result lines: a header plus one line per match, or the not-found line."""
    lines = report.lines
    if not lines:
        return [f"No single-pair parenthetical placement found that results in {report.target}."]
    return [f"Found the following ways to achieve {report.target}:", *lines]


def render_match_table(report: SearchReport, console: Console) -> None:
    """Render a Rich table with the range and inner value of every match."""
    table = Table(
        title=f"Target {report.target}",
        caption=f"{report.candidates} candidates, base value {_fmt_value(report.base_value)}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Range", style="dim", justify="right")
    table.add_column("Inner", style="cyan", justify="right")
    table.add_column("Expression", style="green")

    for m in sorted(report.matches, key=lambda m: m.rendered):
        table.add_row(f"{m.start}-{m.end}", str(m.inner_value), m.rendered)

    console.print()
    console.print(table)
    console.print()


def render_ranges_table(tokens: Sequence[Token], console: Console, target: int | None = None) -> None:
    """Render every candidate range with its parenthesized value.

    Rows whose value equals target (when given) are highlighted.
    """
    table = Table(title="Candidate ranges", show_header=True, header_style="bold")
    table.add_column("Range", style="dim", justify="right")
    table.add_column("Expression")
    table.add_column("Value", justify="right")

    for candidate in candidate_ranges(tokens):
        value = evaluate_with_parentheses(tokens, candidate.start, candidate.end)
        rendered = insert_parentheses(tokens, candidate.start, candidate.end)
        cell = _fmt_value(value)
        if value is not None and value == target:
            cell = f"[bold green]{cell}[/bold green]"
        table.add_row(f"{candidate.start}-{candidate.end}", rendered, cell)

    console.print()
    console.print(table)
    console.print()


def _fmt_value(value: int | None) -> str:
    """Format an evaluation result, '--' for no value."""
    if value is None:
        return "--"
    return str(value)
