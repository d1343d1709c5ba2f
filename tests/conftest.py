"""Pytest fixtures."""

from unittest.mock import MagicMock

import pytest
from overlength.config import Settings
from overlength.highlighter import LineWidthHighlighter
from overlength.host.document import Document, DocumentHost


@pytest.fixture
def sample_lines() -> list[str]:
  # Display widths 40, 85, 120, 79
  return ["a" * 40, "b" * 85, "c" * 120, "d" * 79]


@pytest.fixture
def settings() -> Settings:
  return Settings(margin=10)


@pytest.fixture
def host(sample_lines: list[str]) -> DocumentHost:
  host = DocumentHost()
  host.open("main", Document(lines=sample_lines, width_limit=80))
  return host


@pytest.fixture
def highlighter(host: DocumentHost, settings: Settings) -> LineWidthHighlighter:
  return LineWidthHighlighter(host, settings)


@pytest.fixture
def nvim() -> MagicMock:
  """A stand-in for ``pynvim.Nvim`` with one window showing buffer 1."""
  nvim = MagicMock()
  nvim.current.window.handle = 1000
  nvim.vars = {}
  nvim.funcs.winbufnr.return_value = 1
  options = {"textwidth": 80, "tabstop": 8}
  nvim.api.get_option_value.side_effect = lambda name, opts: options[name]
  nvim.api.buf_get_lines.return_value = ["x" * 40, "y" * 85]
  nvim.funcs.strdisplaywidth.side_effect = len
  nvim.funcs.matchadd.side_effect = range(11, 100)
  nvim.options = options
  return nvim
