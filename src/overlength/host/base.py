"""Editor host abstraction."""

from typing import Any, Protocol

from overlength.models import ColumnRange, Tier, ViewId


class Host(Protocol):
  """Protocol for the editor the highlighter runs inside.

  A host owns views, measures their text and keeps a table of highlight
  regions. The highlighter never inspects a region handle; it only hands
  it back to ``release_region``.

  Example:
    class MyHost:
      def current_view(self) -> ViewId:
        return self.editor.active_window

      def width_limit(self, view: ViewId) -> int:
        return self.editor.wrap_column(view)

      ...
  """

  def current_view(self) -> ViewId:
    """Identity of the view that has focus."""
    ...

  def width_limit(self, view: ViewId) -> int:
    """Configured maximum line width for the view's buffer (0 = none)."""
    ...

  def line_widths(self, view: ViewId) -> list[int]:
    """Display width of every line in the view's buffer."""
    ...

  def display_column(self, view: ViewId, line: int, offset: int) -> int:
    """Display column where character ``offset`` of 1-based ``line`` starts."""
    ...

  def add_region(self, view: ViewId, tier: Tier, columns: ColumnRange) -> Any:
    """Highlight every character starting inside ``columns``.

    Args:
      view: View to highlight in.
      tier: Highlight style.
      columns: Display columns to match.

    Returns:
      Opaque handle to pass to ``release_region``.
    """
    ...

  def release_region(self, view: ViewId, handle: Any) -> None:
    """Remove a region created by ``add_region``."""
    ...
