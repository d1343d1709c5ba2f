"""CLI interface using Typer."""

import os
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from overlength import __version__
from overlength.check import DEFAULT_WIDTH, check_files, resolve_settings
from overlength.config import ConfigError, Settings
from overlength.files import FileError, read_files
from overlength.highlighter import LineWidthHighlighter
from overlength.host.document import Document, DocumentHost
from overlength.log import configure_logging
from overlength.models import Tier
from overlength.output import get_formatter

app = typer.Typer(
  name="overlength",
  help="Flag lines that run past a width limit",
  no_args_is_help=True,
)

console = Console()

TIER_STYLES = {
  Tier.WARNING: "black on yellow",
  Tier.ERROR: "white on red",
}


def _is_debug() -> bool:
  return os.environ.get("OVERLENGTH_DEBUG", "").lower() in ("1", "true", "yes")


def version_callback(value: bool) -> None:
  if value:
    console.print(f"overlength {__version__}")
    raise typer.Exit()


@app.callback()
def main(
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Flag lines that run past a width limit."""


def _fail(error: Exception, show_traceback: bool = False) -> None:
  console.print(f"[red]Error:[/red] {escape(str(error))}")
  if show_traceback:
    console.print("\n[dim]Traceback:[/dim]")
    console.print(traceback.format_exc())
  raise typer.Exit(1) from None


def _setup(config: Path | None, margin: int | None, debug: bool) -> Settings:
  settings = resolve_settings(config, margin)
  configure_logging(debug or settings.debug or _is_debug())
  return settings


@app.command()
def check(
  files: list[str] = typer.Argument(..., help="Files, directories or glob patterns (e.g., 'src/**/*.py')"),
  width: int = typer.Option(DEFAULT_WIDTH, "--width", "-w", min=1, help="Maximum line width"),
  margin: Optional[int] = typer.Option(
    None, "--margin", "-m", min=0, help="Columns past the width treated as warnings"
  ),
  format_type: str = typer.Option("terminal", "--format", help="Output format: terminal, json, github"),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  exit_code: bool = typer.Option(False, "--exit-code", help="Exit 1 when any line is past the margin"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show debug logs and tracebacks"),
) -> None:
  """Report every line wider than the width limit."""
  show_traceback = debug or _is_debug()

  try:
    settings = _setup(config, margin, debug)
    formatter = get_formatter(format_type)
    result = check_files(files, width=width, settings=settings)
    output = formatter.format(result)
    if output:
      console.print(output, markup=False, emoji=False, highlight=False, soft_wrap=True)
  except (ConfigError, FileError, ValueError) as e:
    _fail(e)
  except Exception as e:
    _fail(e, show_traceback)

  if exit_code and result.has_errors:
    raise typer.Exit(1)


@app.command()
def status(
  files: list[str] = typer.Argument(..., help="Files, directories or glob patterns"),
  width: int = typer.Option(DEFAULT_WIDTH, "--width", "-w", min=1, help="Maximum line width"),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show debug logs and tracebacks"),
) -> None:
  """Print the status-line summary of each file."""
  try:
    settings = _setup(config, None, debug)
    host = DocumentHost()
    highlighter = LineWidthHighlighter(host, settings)
    for source in read_files(files):
      host.open(source.path, Document.from_text(source.text, width, settings.tabstop))
      summary = highlighter.status(source.path)
      console.print(f"{source.path}\t{summary}", markup=False, emoji=False, highlight=False)
  except (ConfigError, FileError) as e:
    _fail(e)
  except Exception as e:
    _fail(e, debug or _is_debug())


@app.command()
def show(
  file: str = typer.Argument(..., help="File to display"),
  width: int = typer.Option(DEFAULT_WIDTH, "--width", "-w", min=1, help="Maximum line width"),
  margin: Optional[int] = typer.Option(
    None, "--margin", "-m", min=0, help="Columns past the width treated as warnings"
  ),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show debug logs and tracebacks"),
) -> None:
  """Print a file with its overflowing columns highlighted."""
  try:
    settings = _setup(config, margin, debug)
    source = read_files([file])[0]
    host = DocumentHost()
    document = Document.from_text(source.text, width, settings.tabstop)
    host.open(source.path, document)

    highlighter = LineWidthHighlighter(host, settings)
    highlighter.refresh(source.path)
    _print_highlighted(document, host, source.path)
  except (ConfigError, FileError) as e:
    _fail(e)
  except Exception as e:
    _fail(e, debug or _is_debug())


def _print_highlighted(document: Document, host: DocumentHost, view: str) -> None:
  texts = [Text(line, tab_size=document.tabstop) for line in document.lines]
  for span in host.spans(view):
    texts[span.line - 1].stylize(TIER_STYLES[span.tier], span.start, span.end)

  number_width = len(str(len(texts)))
  for lnum, text in enumerate(texts, start=1):
    console.print(Text(f"{lnum:>{number_width}} ", style="dim"), end="")
    console.print(text, soft_wrap=True)


if __name__ == "__main__":
  app()
