"""Core domain models for long-line highlighting."""

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

ViewId = Hashable


class Tier(Enum):
  """Highlight tier of an overflowing column."""

  WARNING = "warning"
  ERROR = "error"


@dataclass(frozen=True)
class ColumnRange:
  """Inclusive range of 1-based display columns.

  A range with ``last=None`` is unbounded on the right. A range whose
  ``last`` is smaller than ``first`` is empty.
  """

  first: int
  last: int | None = None

  def __contains__(self, column: int) -> bool:
    if column < self.first:
      return False
    return self.last is None or column <= self.last

  @property
  def is_empty(self) -> bool:
    return self.last is not None and self.last < self.first


@dataclass(frozen=True)
class HighlightRegion:
  """A host highlight region owned by a view."""

  handle: Any
  tier: Tier
  columns: ColumnRange


@dataclass(frozen=True)
class StatusSummary:
  """Long-line statistics for one buffer."""

  count: int
  max_width: int


@dataclass(frozen=True)
class LongLine:
  """A single line past the width limit."""

  file: str
  line: int
  width: int
  tier: Tier


@dataclass(frozen=True)
class CheckResult:
  """Result of checking a set of files."""

  lines: Sequence[LongLine]
  files_checked: int
  width: int
  margin: int

  @property
  def has_errors(self) -> bool:
    """Check if any line reaches the error tier."""
    return any(line.tier == Tier.ERROR for line in self.lines)
