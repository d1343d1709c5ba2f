"""Batch detection of long lines across files."""

from pathlib import Path
from typing import Sequence

from overlength.columns import DEFAULT_TABSTOP, display_width, tier_for_width
from overlength.config import Settings, load_config
from overlength.files import read_files
from overlength.models import CheckResult, LongLine

DEFAULT_WIDTH = 80


def check_text(
  path: str,
  text: str,
  width: int,
  margin: int,
  tabstop: int = DEFAULT_TABSTOP,
) -> Sequence[LongLine]:
  """Find the lines of ``text`` wider than ``width`` display columns."""
  if width <= 0:
    return []

  matches: list[LongLine] = []
  for lnum, line in enumerate(text.splitlines(), start=1):
    line_width = display_width(line, tabstop)
    tier = tier_for_width(line_width, width, margin)
    if tier is not None:
      matches.append(LongLine(file=path, line=lnum, width=line_width, tier=tier))
  return matches


def check_files(
  patterns: list[str],
  width: int = DEFAULT_WIDTH,
  settings: Settings | None = None,
  cwd: Path | None = None,
) -> CheckResult:
  """Check every file matched by ``patterns``."""
  settings = settings or Settings()
  files = read_files(patterns, cwd)

  lines: list[LongLine] = []
  for source in files:
    lines.extend(check_text(source.path, source.text, width, settings.margin, settings.tabstop))

  return CheckResult(lines=lines, files_checked=len(files), width=width, margin=settings.margin)


def resolve_settings(
  config_path: Path | None = None,
  margin: int | None = None,
) -> Settings:
  """Load settings and apply command-line overrides."""
  settings = load_config(config_path).model_copy(deep=True)
  if margin is not None:
    settings.margin = margin
  return settings
