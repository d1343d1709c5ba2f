"""Neovim remote plugin entry point."""

import logging

import pynvim
from pydantic import ValidationError

from overlength.config import Settings
from overlength.highlighter import LineWidthHighlighter
from overlength.host.nvim import NvimHost
from overlength.log import NvimMessageHandler, configure_logging

logger = logging.getLogger(__name__)

VAR_PREFIX = "overlength_"
_GLOBAL_VARS = ("enabled", "margin", "debug", "status_format")


def load_settings(nvim, current: Settings | None = None) -> Settings:
  """Read ``g:overlength_*`` variables into settings.

  Unset variables keep their current value. Invalid values are reported
  and the current settings are kept.
  """
  base = current or Settings()
  data = base.model_dump()
  for name in _GLOBAL_VARS:
    value = nvim.vars.get(VAR_PREFIX + name)
    if value is not None:
      data[name] = value

  try:
    return Settings(**data)
  except ValidationError as e:
    logger.warning("Ignoring invalid g:%s* settings: %s", VAR_PREFIX, e)
    return base


@pynvim.plugin
class OverLengthPlugin:
  """Highlights text past ``textwidth`` in every window."""

  def __init__(self, nvim):
    self.nvim = nvim
    settings = load_settings(nvim)
    configure_logging(settings.debug, NvimMessageHandler(nvim))
    self.host = NvimHost(nvim, settings)
    self.highlighter = LineWidthHighlighter(self.host, settings)
    self._highlights_defined = False

  @pynvim.autocmd("CursorMoved,CursorMovedI,BufWinEnter", pattern="*", sync=True)
  def on_cursor_moved(self) -> None:
    self._refresh_current()

  @pynvim.autocmd("OptionSet", pattern="textwidth", sync=True)
  def on_textwidth_set(self) -> None:
    self._refresh_current()

  @pynvim.autocmd("WinClosed", pattern="*", eval='expand("<amatch>")', sync=True)
  def on_win_closed(self, window_id: str) -> None:
    self.highlighter.forget_view(int(window_id))

  @pynvim.command("OverLengthToggle", sync=True)
  def toggle_window(self) -> None:
    self._sync_settings()
    self.highlighter.toggle_view(self.host.current_view())

  @pynvim.command("OverLengthToggleAll", sync=True)
  def toggle_all(self) -> None:
    self._sync_settings()
    enabled = self.highlighter.toggle_global()
    self.nvim.vars[VAR_PREFIX + "enabled"] = int(enabled)

  @pynvim.function("OverLengthStatus", sync=True)
  def status(self, args) -> str:
    self._sync_settings()
    return self.highlighter.status(self.host.current_view())

  @pynvim.function("OverLengthEnabled", sync=True)
  def enabled(self, args) -> int:
    return int(self.highlighter.is_enabled(self.host.current_view()))

  def _refresh_current(self) -> None:
    self._sync_settings()
    self.highlighter.refresh(self.host.current_view())

  def _sync_settings(self) -> None:
    if not self._highlights_defined:
      self.host.define_highlights()
      self._highlights_defined = True

    settings = load_settings(self.nvim, self.highlighter.settings)
    if settings.debug != self.highlighter.settings.debug:
      configure_logging(settings.debug, NvimMessageHandler(self.nvim))
    self.host.settings = settings
    self.highlighter.settings = settings
