"""File pattern resolution and reading."""

import glob as globmod
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class FileError(Exception):
  """File operation failed."""


@dataclass(frozen=True)
class SourceFile:
  """A file's path (as given, relative when possible) and text."""

  path: str
  text: str


# Directories never worth scanning when walking a tree
_EXCLUDED_DIRS: set[str] = {
  "node_modules",
  ".git",
  "__pycache__",
  ".venv",
  "venv",
  "dist",
  "build",
  ".mypy_cache",
  ".pytest_cache",
  "target",
  "vendor",
}


def read_files(patterns: list[str], cwd: Path | None = None) -> list[SourceFile]:
  """Resolve files, globs and directories and read them as text.

  Files named explicitly or matched by a glob must be readable. Files
  found by walking a directory are skipped when they are not text.

  Raises:
    FileError: Nothing matched, or an explicit file could not be read.
  """
  base_path = cwd or Path.cwd()
  explicit, walked = _resolve_patterns(patterns, base_path)

  files: list[SourceFile] = []
  for path in explicit:
    files.append(_read_file(path, base_path))
  for path in walked:
    try:
      files.append(_read_file(path, base_path))
    except FileError as e:
      logger.debug("Skipping %s", e)

  if not files:
    raise FileError(_no_files_error(patterns))
  return files


def _resolve_patterns(patterns: list[str], base_path: Path) -> tuple[list[Path], list[Path]]:
  """Expand patterns into (explicit files, files found under directories)."""
  seen: set[Path] = set()
  explicit: list[Path] = []
  walked: list[Path] = []

  for pattern in patterns:
    for path in _expand_pattern(pattern, base_path):
      if path.is_dir():
        for child in sorted(path.rglob("*")):
          if child not in seen and child.is_file() and not _is_excluded(child, path):
            seen.add(child)
            walked.append(child)
      elif path not in seen and path.is_file():
        seen.add(path)
        explicit.append(path)
      elif not path.exists() and not _is_glob(pattern):
        raise FileError(f"File not found: {pattern}")

  return explicit, walked


def _is_glob(pattern: str) -> bool:
  return any(c in pattern for c in "*?[")


def _is_excluded(path: Path, root: Path) -> bool:
  return bool(set(path.relative_to(root).parts) & _EXCLUDED_DIRS)


def _expand_pattern(pattern: str, base_path: Path) -> list[Path]:
  """Expand a single pattern to matching paths."""
  p = Path(pattern)
  glob_path = p if p.is_absolute() else base_path / p

  if _is_glob(pattern):
    return sorted(Path(match) for match in globmod.glob(str(glob_path), recursive=True))
  return [glob_path]


def _read_file(file_path: Path, base_path: Path) -> SourceFile:
  try:
    rel_path = str(file_path.relative_to(base_path))
  except ValueError:
    rel_path = str(file_path)

  try:
    text = file_path.read_text(encoding="utf-8")
  except (OSError, UnicodeDecodeError) as e:
    raise FileError(f"Cannot read {rel_path}: {e}") from e

  return SourceFile(path=rel_path, text=text)


def _no_files_error(patterns: list[str]) -> str:
  return (
    f"No files matched: {', '.join(patterns)}\n"
    "Use glob patterns like: overlength check 'src/**/*.py'"
  )
