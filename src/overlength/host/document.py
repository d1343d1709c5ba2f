"""In-memory host over plain text documents."""

import itertools
from dataclasses import dataclass, field
from typing import Any

from overlength.columns import DEFAULT_TABSTOP, column_starts, display_width
from overlength.models import ColumnRange, Tier, ViewId


@dataclass
class Document:
  """Text shown in a view, with the width limit it is held to."""

  lines: list[str]
  width_limit: int = 0
  tabstop: int = DEFAULT_TABSTOP

  @classmethod
  def from_text(cls, text: str, width_limit: int = 0, tabstop: int = DEFAULT_TABSTOP) -> "Document":
    return cls(lines=text.splitlines(), width_limit=width_limit, tabstop=tabstop)


@dataclass(frozen=True)
class HighlightSpan:
  """Characters ``start`` up to ``end`` (exclusive) of a 1-based line."""

  line: int
  start: int
  end: int
  tier: Tier


@dataclass
class _Region:
  view: ViewId
  tier: Tier
  columns: ColumnRange


@dataclass
class DocumentHost:
  """Host that keeps views and highlight regions in memory.

  Views are opened with a document and the most recently opened or
  focused view is the current one. Regions are evaluated on demand by
  ``spans`` against each character's starting display column.
  """

  documents: dict[ViewId, Document] = field(default_factory=dict)
  focused: ViewId | None = None
  _regions: dict[int, _Region] = field(default_factory=dict)
  _handles: Any = field(default_factory=lambda: itertools.count(1))

  def open(self, view: ViewId, document: Document) -> None:
    self.documents[view] = document
    self.focused = view

  def focus(self, view: ViewId) -> None:
    if view not in self.documents:
      raise KeyError(f"Unknown view: {view!r}")
    self.focused = view

  def close(self, view: ViewId) -> None:
    """Close a view, dropping its regions with it."""
    self.documents.pop(view)
    for handle in [h for h, r in self._regions.items() if r.view == view]:
      del self._regions[handle]
    if self.focused == view:
      self.focused = next(iter(self.documents), None)

  def current_view(self) -> ViewId:
    if self.focused is None:
      raise LookupError("No view is open")
    return self.focused

  def width_limit(self, view: ViewId) -> int:
    return self.documents[view].width_limit

  def line_widths(self, view: ViewId) -> list[int]:
    doc = self.documents[view]
    return [display_width(line, doc.tabstop) for line in doc.lines]

  def display_column(self, view: ViewId, line: int, offset: int) -> int:
    doc = self.documents[view]
    starts = column_starts(doc.lines[line - 1], doc.tabstop)
    return starts[min(max(offset, 0), len(starts) - 1)]

  def add_region(self, view: ViewId, tier: Tier, columns: ColumnRange) -> int:
    if view not in self.documents:
      raise KeyError(f"Unknown view: {view!r}")
    handle = next(self._handles)
    self._regions[handle] = _Region(view=view, tier=tier, columns=columns)
    return handle

  def release_region(self, view: ViewId, handle: Any) -> None:
    region = self._regions.get(handle)
    if region is None or region.view != view:
      raise ValueError(f"Region {handle!r} is not active in view {view!r}")
    del self._regions[handle]

  def regions(self, view: ViewId) -> list[tuple[Tier, ColumnRange]]:
    """Active regions of a view, in creation order."""
    return [(r.tier, r.columns) for r in self._regions.values() if r.view == view]

  def spans(self, view: ViewId) -> list[HighlightSpan]:
    """Evaluate the view's regions into contiguous character spans."""
    doc = self.documents[view]
    regions = [r for r in self._regions.values() if r.view == view]
    if not regions:
      return []

    result: list[HighlightSpan] = []
    for lnum, text in enumerate(doc.lines, start=1):
      starts = column_starts(text, doc.tabstop)
      current: HighlightSpan | None = None
      for offset in range(len(text)):
        tier = _match_tier(regions, starts[offset])
        if current and tier == current.tier and offset == current.end:
          current = HighlightSpan(lnum, current.start, offset + 1, tier)
          continue
        if current:
          result.append(current)
          current = None
        if tier is not None:
          current = HighlightSpan(lnum, offset, offset + 1, tier)
      if current:
        result.append(current)
    return result


def _match_tier(regions: list[_Region], column: int) -> Tier | None:
  # Later regions win where ranges overlap, as with editor match priority
  tier = None
  for region in regions:
    if column in region.columns:
      tier = region.tier
  return tier
