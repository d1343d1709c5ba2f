"""Logging setup for the CLI and the editor."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "overlength"


def configure_logging(debug: bool = False, handler: logging.Handler | None = None) -> logging.Logger:
  """Attach a single handler to the package logger.

  Args:
    debug: Log refresh details at DEBUG level; otherwise only warnings.
    handler: Destination for records. Defaults to a rich handler on stderr.

  Returns:
    The package logger.
  """
  logger = logging.getLogger(LOGGER_NAME)
  for existing in list(logger.handlers):
    logger.removeHandler(existing)

  if handler is None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
  logger.addHandler(handler)
  logger.setLevel(logging.DEBUG if debug else logging.WARNING)
  logger.propagate = False
  return logger


class NvimMessageHandler(logging.Handler):
  """Write log records to the editor's message area."""

  def __init__(self, nvim, level: int = logging.NOTSET):
    super().__init__(level)
    self.nvim = nvim
    self.setFormatter(logging.Formatter("[overlength] %(levelname)s: %(message)s"))

  def emit(self, record: logging.LogRecord) -> None:
    try:
      message = self.format(record) + "\n"
      if record.levelno >= logging.WARNING:
        self.nvim.err_write(message)
      else:
        self.nvim.out_write(message)
    except Exception:
      self.handleError(record)
