"""
CLI Output Formatting

Rich text formatting utilities for CLI output: generic tables and
submission summaries.
"""

from typing import Dict, List, Any, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from ..evaluation.metrics import SubmissionSummary
from ..evaluation.types import EvaluationResult

console = Console()


def format_table(data: List[Dict[str, Any]], title: str = "Results", headers: Optional[List[str]] = None) -> Table:
    """
    Format data as a Rich table.

    Args:
        data: List of dictionaries with row data
        title: Table title
        headers: Optional list of column headers (uses keys from first row if not provided)

    Returns:
        Rich Table object
    """
    if not data:
        table = Table(title=title)
        table.add_column("Message", style="dim")
        table.add_row("No data available")
        return table

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold blue")

    for header in headers:
        table.add_column(header, style="white", justify="left")

    for row in data:
        table.add_row(*[str(row.get(header, "N/A")) for header in headers])

    return table


def format_summary(summary: SubmissionSummary) -> Panel:
    """Summary panel for a graded submission."""
    color = "green" if summary.percentage_score >= 60 else "yellow"
    body = (
        f"[bold]Submission:[/bold] {summary.submission_id}\n"
        f"[bold]User:[/bold] {summary.user_id}\n"
        f"[bold]Submitted:[/bold] {summary.timestamp}\n\n"
        f"[bold]Score:[/bold] {summary.total_score} / {summary.max_score}\n"
        f"[bold]Correct:[/bold] {summary.correct_count} / {summary.total_questions} "
        f"([{color}]{summary.percentage_score}%[/{color}])\n"
        f"[bold]Wrong:[/bold] {summary.wrong_count}"
    )
    return Panel.fit(body, title="Submission Result", border_style=color)


def format_results(results: List[EvaluationResult], answers: Dict[str, Any]) -> Table:
    """Per-question evaluation table."""
    table = Table(title="Answers", show_header=True, header_style="bold blue")
    table.add_column("Question")
    table.add_column("Type")
    table.add_column("Answer", overflow="fold")
    table.add_column("Accuracy", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Result", justify="center")

    for result in results:
        table.add_row(
            result.question_id,
            result.question_type.value,
            str(answers.get(result.question_id) or ""),
            f"{result.accuracy:.2f}",
            f"{result.awarded_score}/{result.base_score}",
            "[green]✓[/green]" if result.is_correct else "[red]✗[/red]",
        )

    return table
