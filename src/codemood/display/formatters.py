"""Rich formatting utilities for displaying mood analysis results."""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from codemood.core.metrics_collector import round_half_up
from codemood.core.models import (
    MOOD_REGISTRY,
    AggregateMood,
    FileAnalysisResult,
    MetricsRecord,
    MetricTotals,
    Mood,
)
from codemood.display.console import console

BAR_WIDTH = 20

MOOD_COLORS: dict[Mood, str] = {
    Mood.ECSTATIC: "bright_green",
    Mood.HAPPY: "green",
    Mood.CONTENT: "cyan",
    Mood.NEUTRAL: "white",
    Mood.STRESSED: "yellow",
    Mood.FRUSTRATED: "dark_orange",
    Mood.SAD: "red",
    Mood.ZEN: "magenta",
    Mood.CHAOTIC: "bright_red",
    Mood.MYSTERIOUS: "blue",
}


def _mood_label(mood: Mood) -> str:
    color = MOOD_COLORS[mood]
    return f"[{color}]{mood.value.upper()}[/{color}]"


def display_file_report(result: FileAnalysisResult) -> None:
    """Display the full mood report for a single file.

    Args:
        result: Analysis result to display
    """
    metrics = result.metrics
    verdict = result.verdict

    console.print("\n[bold]📊 CODE MOOD ANALYZER RESULTS[/bold]")
    console.print(f"\n📁 File: [bold]{escape(metrics.filename)}[/bold]")
    console.print(f"{verdict.emoji}  Mood: {_mood_label(verdict.mood)} (Score: {verdict.score}/100)")
    console.print(f'\n[italic]"{verdict.description}"[/italic]\n')

    stats_table = Table(title="📈 Statistics")
    stats_table.add_column("Metric", style="cyan")
    stats_table.add_column("Value", justify="right")
    stats_table.add_row("Total Lines", str(metrics.total_lines))
    stats_table.add_row("Code Lines", str(metrics.code_lines))
    stats_table.add_row("Comment Lines", str(metrics.comment_lines))
    stats_table.add_row("Blank Lines", str(metrics.blank_lines))
    stats_table.add_row("Functions", str(metrics.function_count))
    stats_table.add_row("Max Nesting", f"{metrics.nesting_depth} levels")
    console.print(stats_table)

    console.print(_create_indicator_table("🎯 Mood Indicators", metrics))

    if result.suggestions:
        console.print("\n[bold]💭 Suggestions[/bold]")
        for suggestion in result.suggestions:
            console.print(f"  • {suggestion}")


def _create_indicator_table(title: str, counts: MetricsRecord | MetricTotals) -> Table:
    """Build the vocabulary and work-marker table shared by file and directory reports."""
    table = Table(title=title)
    table.add_column("Indicator", style="cyan")
    table.add_column("Count", justify="right")

    table.add_row("Positive Words 😊", f"[green]{counts.positive_words}[/green]")
    table.add_row("Negative Words 😢", f"[red]{counts.negative_words}[/red]")
    table.add_row("Stress Words 😰", f"[yellow]{counts.stress_words}[/yellow]")

    for label, count in (("TODOs", counts.todo_count), ("FIXMEs", counts.fixme_count), ("Hacks", counts.hack_count)):
        color = "red" if count > 0 else "green"
        table.add_row(label, f"[{color}]{count}[/{color}]")

    return table


def display_file_line(result: FileAnalysisResult, root: Path) -> None:
    """Display a compact one-line mood summary while scanning a directory."""
    path = Path(result.path)
    try:
        shown = path.relative_to(root)
    except ValueError:
        shown = path

    verdict = result.verdict
    console.print(f"  {verdict.emoji} {escape(str(shown))} - {verdict.mood.value} ({verdict.score})")


def display_directory_summary(summary: AggregateMood) -> None:
    """Display codebase-level mood totals and distribution.

    Args:
        summary: Aggregate produced from the per-file results
    """
    dominant = MOOD_REGISTRY[summary.dominant_mood]

    console.print("\n[bold]📊 CODEBASE MOOD SUMMARY[/bold]")
    console.print(f"\n📁 Files Analyzed: {summary.file_count}")
    console.print(f"📈 Average Mood Score: {summary.average_score}/100")
    console.print(f"\n{dominant.emoji}  Dominant Mood: {_mood_label(summary.dominant_mood)}\n")

    console.print(create_distribution_table(summary))

    totals = summary.totals
    stats_table = Table(title="📈 Aggregate Statistics")
    stats_table.add_column("Metric", style="cyan")
    stats_table.add_column("Value", justify="right")
    stats_table.add_row("Total Lines", str(totals.total_lines))
    stats_table.add_row("Code Lines", str(totals.code_lines))
    stats_table.add_row("Comment Lines", str(totals.comment_lines))
    stats_table.add_row("Total Functions", str(totals.function_count))
    console.print(stats_table)

    console.print(_create_indicator_table("🎯 Mood Indicators", totals))


def create_distribution_table(summary: AggregateMood) -> Table:
    """Create a table of mood frequencies, most common first."""
    table = Table(title="📊 Mood Distribution")
    table.add_column("Mood", style="bold")
    table.add_column("Share")
    table.add_column("%", justify="right")
    table.add_column("Files", justify="right")

    for mood, count in summary.distribution():
        share = count / summary.file_count
        color = MOOD_COLORS[mood]
        table.add_row(
            f"{MOOD_REGISTRY[mood].emoji} {mood.value}",
            f"[{color}]{'█' * round_half_up(share * BAR_WIDTH)}[/{color}]",
            f"{round_half_up(share * 100)}%",
            str(count),
        )

    return table


def create_moods_table() -> Table:
    """Create a table describing every possible mood."""
    table = Table(title="🎭 Possible Moods")
    table.add_column("", justify="center")
    table.add_column("Mood", style="bold")
    table.add_column("Meaning")

    for mood, profile in MOOD_REGISTRY.items():
        table.add_row(profile.emoji, _mood_label(mood), profile.summary)

    return table
