"""Neovim loads remote plugins from this directory; the plugin lives in the package."""

from overlength.rplugin import OverLengthPlugin  # noqa: F401
