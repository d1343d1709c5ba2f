"""Report formatting."""

from overlength.output.formatter import (
  GitHubFormatter,
  JsonFormatter,
  OutputFormatter,
  TerminalFormatter,
  get_formatter,
)

__all__ = [
  "GitHubFormatter",
  "JsonFormatter",
  "OutputFormatter",
  "TerminalFormatter",
  "get_formatter",
]
