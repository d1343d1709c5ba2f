"""Display column arithmetic.

Columns are 1-based display cells, the way an editor draws them: a tab
advances to the next multiple of ``tabstop``, East Asian wide glyphs take
two cells, and combining or other zero-width characters take none.
"""

import unicodedata

from wcwidth import wcwidth

from overlength.models import ColumnRange, Tier

DEFAULT_TABSTOP = 8


def char_width(char: str) -> int:
  """Return the number of cells a single non-tab character occupies."""
  if unicodedata.combining(char):
    return 0
  width = wcwidth(char)
  # Unprintable control characters still take a cell on screen
  return width if width >= 0 else 1


def column_starts(line: str, tabstop: int = DEFAULT_TABSTOP) -> list[int]:
  """Return the starting display column of every character in ``line``.

  The returned list has ``len(line) + 1`` entries; the last one is the
  column just past the end of the line.
  """
  starts: list[int] = []
  column = 1
  for char in line:
    starts.append(column)
    if char == "\t":
      column += tabstop - (column - 1) % tabstop
    else:
      column += char_width(char)
  starts.append(column)
  return starts


def display_column(line: str, offset: int, tabstop: int = DEFAULT_TABSTOP) -> int:
  """Return the display column where the character at ``offset`` starts.

  Offsets past the end of the line clamp to the column after the last
  character.
  """
  starts = column_starts(line, tabstop)
  return starts[min(max(offset, 0), len(line))]


def display_width(line: str, tabstop: int = DEFAULT_TABSTOP) -> int:
  """Return the rendered width of ``line`` in cells."""
  return column_starts(line, tabstop)[-1] - 1


def overflow_ranges(limit: int, margin: int) -> tuple[ColumnRange, ColumnRange]:
  """Return the warning and error column ranges for a width limit.

  The warning band is the closed interval ``[limit+1, limit+margin]``,
  exactly ``margin`` columns wide; the error band starts right after it
  and is unbounded.
  """
  warning = ColumnRange(first=limit + 1, last=limit + margin)
  error = ColumnRange(first=limit + margin + 1)
  return warning, error


def tier_for_width(width: int, limit: int, margin: int) -> Tier | None:
  """Classify a line by its display width, or None if it fits."""
  if limit <= 0 or width <= limit:
    return None
  if width > limit + margin:
    return Tier.ERROR
  return Tier.WARNING
