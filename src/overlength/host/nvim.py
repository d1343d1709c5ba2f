"""Neovim host backed by window-local matches."""

from typing import Any

from overlength.config import Settings
from overlength.models import ColumnRange, Tier

MATCH_PRIORITY = 10


def match_pattern(columns: ColumnRange) -> str:
  """Build a Vim regex matching characters that start inside ``columns``.

  Both virtual-column assertions sit before the ``.`` so they test the
  character's starting column, not the position after it.
  """
  pattern = rf"\%>{columns.first - 1}v"
  if columns.last is not None:
    pattern += rf"\%<{columns.last + 1}v"
  return pattern + "."


class NvimHost:
  """Host over a ``pynvim.Nvim`` session.

  Views are window IDs and the width limit of a window is its buffer's
  ``textwidth``. Widths and columns come from Neovim itself, so they
  follow ``tabstop``, ``vartabstop`` and ``ambiwidth`` the same way the
  ``\\%v`` match patterns do.
  """

  def __init__(self, nvim, settings: Settings):
    self.nvim = nvim
    self.settings = settings

  def current_view(self) -> int:
    return self.nvim.current.window.handle

  def width_limit(self, view: int) -> int:
    return self._buffer_option(view, "textwidth")

  def line_widths(self, view: int) -> list[int]:
    return [self.nvim.funcs.strdisplaywidth(line) for line in self._lines(view)]

  def display_column(self, view: int, line: int, offset: int) -> int:
    # virtcol() takes a 1-based byte column; "$" is just past the last character
    text = self.nvim.api.buf_get_lines(self._buffer(view), line - 1, line, True)[0]
    offset = max(offset, 0)
    col = len(text[:offset].encode("utf-8")) + 1 if offset < len(text) else "$"
    start, _end = self.nvim.funcs.virtcol([line, col], 1, view)
    return start

  def add_region(self, view: int, tier: Tier, columns: ColumnRange) -> int:
    group = self.settings.error_group if tier == Tier.ERROR else self.settings.warning_group
    return self.nvim.funcs.matchadd(
      group, match_pattern(columns), MATCH_PRIORITY, -1, {"window": view}
    )

  def release_region(self, view: int, handle: Any) -> None:
    self.nvim.funcs.matchdelete(handle, view)

  def define_highlights(self) -> None:
    """Link the highlight groups unless the colorscheme defines them."""
    self.nvim.command(f"highlight default link {self.settings.warning_group} WarningMsg")
    self.nvim.command(f"highlight default link {self.settings.error_group} ErrorMsg")

  def _buffer(self, view: int) -> int:
    return self.nvim.funcs.winbufnr(view)

  def _buffer_option(self, view: int, name: str) -> int:
    return self.nvim.api.get_option_value(name, {"buf": self._buffer(view)})

  def _lines(self, view: int) -> list[str]:
    return self.nvim.api.buf_get_lines(self._buffer(view), 0, -1, False)
