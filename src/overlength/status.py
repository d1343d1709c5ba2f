"""Status-line summary of long lines."""

from typing import Iterable

from overlength.models import StatusSummary

DEFAULT_STATUS_FORMAT = "#{count} ${max_width}"


def summarize(widths: Iterable[int], limit: int) -> StatusSummary | None:
  """Count lines wider than ``limit`` and find the widest.

  Returns:
    None when there is no limit or every line fits.
  """
  if limit <= 0:
    return None

  long_widths = [width for width in widths if width > limit]
  if not long_widths:
    return None
  return StatusSummary(count=len(long_widths), max_width=max(long_widths))


def status_summary(
  widths: Iterable[int],
  limit: int,
  fmt: str = DEFAULT_STATUS_FORMAT,
) -> str:
  """Format the summary for a status line, or "" if nothing is long."""
  summary = summarize(widths, limit)
  if summary is None:
    return ""
  return fmt.format(count=summary.count, max_width=summary.max_width)
