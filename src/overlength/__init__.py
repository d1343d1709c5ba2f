"""Two-tier highlighting of lines past a width limit."""

__version__ = "0.1.0"
