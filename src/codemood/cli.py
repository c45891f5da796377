"""Main CLI dispatcher for codemood."""

import logging
import sys
from pathlib import Path

import click
from rich.logging import RichHandler
from rich.markup import escape

from codemood import __version__
from codemood.core.aggregator import aggregate
from codemood.core.errors import MoodAnalysisError, UnsupportedFileError
from codemood.core.file_utils import get_code_files
from codemood.core.mood_analyzer import MoodAnalyzer
from codemood.core.settings import settings
from codemood.display.console import console
from codemood.display.formatters import (
    create_moods_table,
    display_directory_summary,
    display_file_line,
    display_file_report,
)


def configure_logging(debug: bool) -> None:
    """Route library logging through Rich when debugging."""
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__, message="Code Mood Analyzer v%(version)s")
@click.option("--debug", is_flag=True, help="Show debug logging")
def cli(debug: bool) -> None:
    """Code Mood Analyzer - analyze the "mood" of your code.

    Moods are derived from comments, nesting, vocabulary, TODO/FIXME/HACK
    markers and other lexical signals.
    """
    configure_logging(debug or settings.debug_mode)


@cli.command()
def moods() -> None:
    """Show all possible moods."""
    console.print(create_moods_table())


@cli.command()
@click.argument("target", type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON instead of a report")
def analyze(target: Path, as_json: bool) -> None:
    """Analyze a source file or every supported file in a directory.

    \b
    Examples:
      codemood analyze src/index.js   Analyze a single file
      codemood analyze ./src          Analyze all files in src/
      codemood analyze .              Analyze current directory

    \b
    Supported file types:
      JavaScript (.js, .jsx), TypeScript (.ts, .tsx), Python (.py),
      Java (.java), C/C++ (.c, .cpp), C# (.cs), Go (.go), Ruby (.rb),
      Rust (.rs), PHP (.php), Swift (.swift)
    """
    full_path = target.resolve()

    if not full_path.exists():
        console.print(f"[red]Error: Path does not exist: {escape(str(target))}[/red]")
        sys.exit(1)

    analyzer = MoodAnalyzer()

    if full_path.is_dir():
        _analyze_directory(analyzer, full_path, as_json)
        return

    try:
        result = analyzer.analyze_file_or_raise(full_path)
    except UnsupportedFileError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        console.print("[dim]Run 'codemood analyze --help' to see supported types.[/dim]")
        sys.exit(1)
    except MoodAnalysisError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if as_json:
        click.echo(result.model_dump_json(indent=2))
    else:
        display_file_report(result)


def _analyze_directory(analyzer: MoodAnalyzer, directory: Path, as_json: bool) -> None:
    """Analyze a directory tree and print either JSON or the per-file lines and summary."""
    if as_json:
        analysis = analyzer.analyze_directory(directory)
        click.echo(analysis.model_dump_json(indent=2))
        return

    files = get_code_files(directory)
    if not files:
        console.print("No supported code files found in the directory.")
        return

    console.print(f"\n🔍 Analyzing {len(files)} files...\n")
    results = analyzer.analyze_files(files)
    for result in results:
        display_file_line(result, directory)

    skipped = len(files) - len(results)
    if skipped:
        console.print(f"[yellow]Skipped {skipped} unreadable file(s)[/yellow]")

    if results:
        display_directory_summary(aggregate(results))


if __name__ == "__main__":
    cli()
