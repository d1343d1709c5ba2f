"""Editor hosts the highlighter can drive."""

from overlength.host.base import Host
from overlength.host.document import Document, DocumentHost, HighlightSpan

__all__ = ["Document", "DocumentHost", "HighlightSpan", "Host"]
