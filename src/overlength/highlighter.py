"""Per-view reconciliation of long-line highlight regions."""

import logging
from dataclasses import dataclass, field

from overlength.columns import overflow_ranges
from overlength.config import Settings
from overlength.host.base import Host
from overlength.models import ColumnRange, HighlightRegion, Tier, ViewId
from overlength.status import status_summary

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
  """Highlighting state owned by one view."""

  enabled: bool = True
  regions: list[HighlightRegion] = field(default_factory=list)

  @property
  def ranges(self) -> tuple[ColumnRange, ...]:
    return tuple(region.columns for region in self.regions)


class LineWidthHighlighter:
  """Keeps each view's warning and error regions in sync with settings.

  A view always holds either no regions or exactly two: a warning region
  covering the margin band past the width limit, followed by an error
  region covering everything beyond it. ``refresh`` is cheap when nothing
  changed, so hosts can call it on every cursor move.

  Example:
    highlighter = LineWidthHighlighter(host, Settings(margin=4))
    highlighter.refresh(host.current_view())
  """

  def __init__(self, host: Host, settings: Settings | None = None):
    self.host = host
    self.settings = settings or Settings()
    self._views: dict[ViewId, ViewState] = {}

  def state(self, view: ViewId) -> ViewState:
    """Return the view's state, creating it on first use."""
    if view not in self._views:
      self._views[view] = ViewState()
    return self._views[view]

  def is_enabled(self, view: ViewId) -> bool:
    """Check if highlighting is on both globally and for the view."""
    view_state = self._views.get(view)
    view_enabled = view_state.enabled if view_state else True
    return self.settings.enabled and view_enabled

  def refresh(self, view: ViewId) -> None:
    """Bring the view's regions in line with the current settings."""
    view_state = self.state(view)
    limit = self.host.width_limit(view)

    if limit <= 0 or not self.is_enabled(view):
      self._clear(view, view_state)
      return

    wanted = overflow_ranges(limit, self.settings.margin)
    if view_state.ranges == wanted:
      return

    if view_state.regions:
      logger.debug("Width settings changed for view %r, rebuilding regions", view)
      self._clear(view, view_state)

    warning, error = wanted
    for tier, columns in ((Tier.WARNING, warning), (Tier.ERROR, error)):
      handle = self.host.add_region(view, tier, columns)
      view_state.regions.append(HighlightRegion(handle=handle, tier=tier, columns=columns))
    logger.debug(
      "Highlighting view %r: warning %d-%d, error from %d",
      view, warning.first, warning.last, error.first,
    )

  def toggle_view(self, view: ViewId) -> bool:
    """Flip highlighting for one view and return the new view flag."""
    view_state = self.state(view)
    view_state.enabled = not view_state.enabled
    logger.debug("View %r highlighting %s", view, "on" if view_state.enabled else "off")
    self.refresh(view)
    return view_state.enabled

  def toggle_global(self) -> bool:
    """Flip highlighting globally and refresh the current view.

    Other views pick up the change on their next refresh.
    """
    self.settings.enabled = not self.settings.enabled
    logger.debug("Global highlighting %s", "on" if self.settings.enabled else "off")
    self.refresh(self.host.current_view())
    return self.settings.enabled

  def reload(self, settings: Settings) -> None:
    """Swap in new settings and refresh the current view."""
    self.settings = settings
    self.refresh(self.host.current_view())

  def forget_view(self, view: ViewId) -> None:
    """Drop state for a view the host has closed.

    The host discards a closed view's regions itself, so nothing is
    released here.
    """
    self._views.pop(view, None)

  def status(self, view: ViewId) -> str:
    """Status-line summary of the view's long lines."""
    limit = self.host.width_limit(view)
    if limit <= 0:
      return ""
    return status_summary(self.host.line_widths(view), limit, self.settings.status_format)

  def _clear(self, view: ViewId, view_state: ViewState) -> None:
    if not view_state.regions:
      return
    for region in view_state.regions:
      self.host.release_region(view, region.handle)
    view_state.regions.clear()
    logger.debug("Cleared highlighting in view %r", view)
