#!/usr/bin/env python3
"""
Glossary Generator - Command Line Interface
"""
import sys
import click
from pathlib import Path
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..core.exceptions import GlossarySystemError
from ..core.interfaces import IProgressCallback
from ..core.models import DuplicatePolicy, GenerationJob, RenderedPage
from ..core.pipeline import GlossaryPipeline
from ..core.tokenizer import Tokenizer
from ..formatters.page_sink import FilePageSink
from ..parsers.record_parser import FileRecordSource
from ..utils.config_manager import ConfigManager
from ..utils.logger import setup_logging


console = Console()
err_console = Console(stderr=True)


class RichProgressCallback(IProgressCallback):
    """Progress callback using Rich library."""

    def __init__(self, progress: Progress, task_id):
        self.progress = progress
        self.task_id = task_id

    def on_start(self, job: GenerationJob) -> None:
        self.progress.update(self.task_id, total=job.total_terms + 1)

    def on_page_written(self, job: GenerationJob, page: RenderedPage) -> None:
        self.progress.update(self.task_id, completed=job.pages_written)

    def on_complete(self, job: GenerationJob) -> None:
        pass

    def on_error(self, job: GenerationJob, error: Exception) -> None:
        err_console.print(f"[red]Error: {error}[/red]")


def _load_config(config_path):
    """Load config, exiting with a message when it is invalid."""
    try:
        return ConfigManager(config_path).config
    except (GlossarySystemError, OSError, ValueError) as e:
        err_console.print(f"[red]Error: invalid config: {e}[/red]")
        sys.exit(1)


def _terms_table(terms) -> Table:
    table = Table(title="Terms")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Term", style="cyan")
    for i, term in enumerate(terms, 1):
        table.add_row(str(i), Text(term))
    return table


@click.group()
@click.version_option(version=__version__)
def cli():
    """Glossary Generator - Build a cross-linked HTML glossary from a terms file."""
    pass


@cli.command()
@click.argument('input_file', required=False, type=click.Path(path_type=Path))
@click.argument('index_file', required=False)
@click.option('--output-dir', '-o', type=click.Path(file_okay=False, path_type=Path), help='Directory for generated pages')
@click.option('--separators', help='Characters that separate words (default: space, tab, comma)')
@click.option('--duplicates', type=click.Choice([p.value for p in DuplicatePolicy]), help='How repeated terms are handled')
@click.option('--trailing-space', is_flag=True, help='Keep a space after every definition line')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False, path_type=Path), help='Config file (YAML or JSON)')
@click.option('--quiet', '-q', is_flag=True, help='Only print errors')
def build(input_file, index_file, output_dir, separators, duplicates, trailing_space, config_path, quiet):
    """
    Generate the glossary pages.

    Prompts for the terms file and the index page name when they are not
    given on the command line.

    Examples:

        # Interactive
        glossgen build

        # Terms in terms.txt, pages in site/, index at site/index.html
        glossgen build terms.txt index.html -o site
    """
    config = _load_config(config_path)
    setup_logging(
        log_dir=Path(config.logging.log_dir) if config.logging.log_dir else None,
        log_level=config.logging.log_level,
        console_level="ERROR" if quiet else config.logging.console_level,
        use_colors=config.logging.use_colors,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
    )

    if input_file is None:
        input_file = Path(click.prompt("Terms file name"))
    if index_file is None:
        index_file = click.prompt("Index file name", default=config.output.index_name)

    # Command line options win over the config file
    if separators is not None:
        config.tokenizer.separators = separators
    if duplicates is not None:
        config.glossary.duplicate_policy = duplicates
    if trailing_space:
        config.input.trailing_space = True
    if output_dir is None:
        output_dir = Path(config.output.output_dir)

    pipeline = GlossaryPipeline.from_config(config)
    source = FileRecordSource(
        input_file,
        encoding=config.input.encoding,
        trailing_space=config.input.trailing_space,
    )
    sink = FilePageSink(output_dir, encoding=config.output.encoding)

    if not quiet:
        console.print("\n[bold cyan]📖 Glossary Generator[/bold cyan]")
        console.print(f"[dim]Input:  {input_file}[/dim]")
        console.print(f"[dim]Output: {output_dir / index_file}[/dim]\n")

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
            disable=quiet,
        ) as progress:
            task = progress.add_task("[cyan]Writing pages...", total=None)
            callback = RichProgressCallback(progress, task)

            job = pipeline.generate(source, sink, index_name=index_file, progress_callback=callback)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(1)
    except GlossarySystemError:
        # Already reported by RichProgressCallback.on_error
        sys.exit(1)

    if quiet:
        return

    console.print(_terms_table(job.terms))

    table = Table(title="Generation Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Terms", str(job.total_terms))
    table.add_row("Pages written", str(job.pages_written))
    table.add_row("Cross-links", str(job.links_created))
    table.add_row("Duration", f"{job.duration:.2f}s")
    console.print(table)

    console.print(f"\n[bold green]✓ Glossary complete![/bold green]")
    console.print(f"[dim]Index: {output_dir / index_file}[/dim]\n")


@cli.command()
@click.argument('text')
@click.option('--separators', help='Characters that separate words')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False, path_type=Path), help='Config file (YAML or JSON)')
def tokens(text, separators, config_path):
    """
    Show how TEXT is split into word and separator tokens.

    Example:
        glossgen tokens "a mapping, from key to value"
    """
    if separators is None:
        separators = _load_config(config_path).tokenizer.separators

    tokenizer = Tokenizer.from_separators(separators)

    table = Table(title="Tokens")
    table.add_column("Start", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Text", style="green")
    for token in tokenizer.tokens(text):
        table.add_row(str(token.start), token.kind.value, Text(repr(token.text)))
    console.print(table)


@cli.command('init-config')
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path), default='glossgen.yaml')
@click.option('--force', is_flag=True, help='Overwrite an existing file')
def init_config(path, force):
    """Write a commented configuration template to PATH."""
    if path.exists() and not force:
        err_console.print(f"[red]Error: {path} already exists (use --force)[/red]")
        sys.exit(1)

    ConfigManager.export_template(path)
    console.print(f"[green]✓ Config template written to {path}[/green]")


if __name__ == '__main__':
    cli()
