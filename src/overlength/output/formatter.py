"""Output formatting for long-line reports."""

import json
from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from overlength.models import CheckResult, Tier


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, result: CheckResult) -> str:
    """Format check result for output."""
    ...


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  TIER_STYLES = {
    Tier.ERROR: "red",
    Tier.WARNING: "yellow",
  }

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, result: CheckResult) -> str:
    if not result.lines:
      self.console.print(
        f"[green]No lines over {result.width} columns[/green] "
        f"[dim]({result.files_checked} file(s) checked)[/dim]"
      )
      return ""

    table = Table(show_header=True, header_style="bold")
    table.add_column("Tier", width=8)
    table.add_column("File", min_width=20)
    table.add_column("Line", width=6, justify="right")
    table.add_column("Width", width=6, justify="right")

    for long_line in result.lines:
      style = self.TIER_STYLES.get(long_line.tier, "")
      table.add_row(
        Text(long_line.tier.value.upper(), style=style),
        self._make_file_link(long_line.file, long_line.line),
        str(long_line.line),
        str(long_line.width),
      )

    self.console.print(table)
    errors = sum(1 for line in result.lines if line.tier == Tier.ERROR)
    self.console.print(
      f"\n[dim]{len(result.lines)} long line(s), {errors} past the "
      f"{result.margin}-column margin[/dim]"
    )
    return ""

  def _make_file_link(self, file_path: str, line: int) -> str:
    """Create a clickable file link for terminals that support hyperlinks."""
    url = Path(file_path).resolve().as_uri()
    return f"[link={url}:{line}]{file_path}[/link]"


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, result: CheckResult) -> str:
    data = {
      "width": result.width,
      "margin": result.margin,
      "files_checked": result.files_checked,
      "lines": [
        {
          "file": line.file,
          "line": line.line,
          "width": line.width,
          "tier": line.tier.value,
        }
        for line in result.lines
      ],
    }
    return json.dumps(data, indent=2)


class GitHubFormatter(OutputFormatter):
  """GitHub Actions workflow command formatter for PR annotations."""

  def format(self, result: CheckResult) -> str:
    lines = []
    for long_line in result.lines:
      level = "error" if long_line.tier == Tier.ERROR else "warning"
      message = f"Line is {long_line.width} columns wide (limit {result.width})"
      lines.append(f"::{level} file={long_line.file},line={long_line.line}::{message}")
    return "\n".join(lines)


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
    "github": GitHubFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
