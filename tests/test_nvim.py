"""Tests for the Neovim host and remote plugin."""

from unittest.mock import MagicMock, call

import pytest
from overlength.config import Settings
from overlength.highlighter import LineWidthHighlighter
from overlength.host.nvim import NvimHost, match_pattern
from overlength.models import ColumnRange, Tier
from overlength.rplugin import OverLengthPlugin, load_settings


class TestMatchPattern:
  def test_bounded_range(self) -> None:
    assert match_pattern(ColumnRange(81, 90)) == r"\%>80v\%<91v."

  def test_unbounded_range(self) -> None:
    assert match_pattern(ColumnRange(91)) == r"\%>90v."


class TestNvimHost:
  def test_current_view_is_window_id(self, nvim: MagicMock) -> None:
    assert NvimHost(nvim, Settings()).current_view() == 1000

  def test_width_limit_reads_textwidth(self, nvim: MagicMock) -> None:
    host = NvimHost(nvim, Settings())

    assert host.width_limit(1000) == 80
    nvim.funcs.winbufnr.assert_called_with(1000)
    nvim.api.get_option_value.assert_called_with("textwidth", {"buf": 1})

  def test_line_widths(self, nvim: MagicMock) -> None:
    assert NvimHost(nvim, Settings()).line_widths(1000) == [40, 85]
    nvim.api.buf_get_lines.assert_called_with(1, 0, -1, False)

  def test_line_widths_use_editor_measure(self, nvim: MagicMock) -> None:
    # e.g. ambiwidth=double makes "·" two cells wide
    nvim.api.buf_get_lines.return_value = ["·" * 3]
    nvim.funcs.strdisplaywidth.side_effect = lambda line: 2 * len(line)

    assert NvimHost(nvim, Settings()).line_widths(1000) == [6]
    nvim.funcs.strdisplaywidth.assert_called_once_with("·" * 3)

  def test_display_column(self, nvim: MagicMock) -> None:
    nvim.api.buf_get_lines.return_value = ["\tx"]
    nvim.funcs.virtcol.return_value = [9, 9]

    assert NvimHost(nvim, Settings()).display_column(1000, 1, 1) == 9
    nvim.funcs.virtcol.assert_called_once_with([1, 2], 1, 1000)

  def test_display_column_converts_to_byte_column(self, nvim: MagicMock) -> None:
    nvim.api.buf_get_lines.return_value = ["日x"]
    nvim.funcs.virtcol.return_value = [3, 3]

    assert NvimHost(nvim, Settings()).display_column(1000, 1, 1) == 3
    nvim.funcs.virtcol.assert_called_once_with([1, 4], 1, 1000)

  def test_display_column_past_end(self, nvim: MagicMock) -> None:
    nvim.api.buf_get_lines.return_value = ["abc"]
    nvim.funcs.virtcol.return_value = [4, 4]

    assert NvimHost(nvim, Settings()).display_column(1000, 1, 10) == 4
    nvim.funcs.virtcol.assert_called_once_with([1, "$"], 1, 1000)

  def test_add_region_uses_tier_group(self, nvim: MagicMock) -> None:
    host = NvimHost(nvim, Settings())

    warning = host.add_region(1000, Tier.WARNING, ColumnRange(81, 90))
    error = host.add_region(1000, Tier.ERROR, ColumnRange(91))

    assert (warning, error) == (11, 12)
    assert nvim.funcs.matchadd.call_args_list == [
      call("OverLengthWarning", r"\%>80v\%<91v.", 10, -1, {"window": 1000}),
      call("OverLengthError", r"\%>90v.", 10, -1, {"window": 1000}),
    ]

  def test_release_region(self, nvim: MagicMock) -> None:
    NvimHost(nvim, Settings()).release_region(1000, 11)
    nvim.funcs.matchdelete.assert_called_once_with(11, 1000)

  def test_define_highlights(self, nvim: MagicMock) -> None:
    NvimHost(nvim, Settings()).define_highlights()

    nvim.command.assert_any_call("highlight default link OverLengthWarning WarningMsg")
    nvim.command.assert_any_call("highlight default link OverLengthError ErrorMsg")

  def test_highlighter_does_not_churn_matches(self, nvim: MagicMock) -> None:
    highlighter = LineWidthHighlighter(NvimHost(nvim, Settings()))

    highlighter.refresh(1000)
    highlighter.refresh(1000)

    assert nvim.funcs.matchadd.call_count == 2
    nvim.funcs.matchdelete.assert_not_called()


class TestLoadSettings:
  def test_defaults_without_variables(self, nvim: MagicMock) -> None:
    assert load_settings(nvim) == Settings()

  def test_reads_global_variables(self, nvim: MagicMock) -> None:
    nvim.vars.update({"overlength_enabled": 0, "overlength_margin": 4, "overlength_debug": 1})

    settings = load_settings(nvim)

    assert settings.enabled is False
    assert settings.margin == 4
    assert settings.debug is True

  def test_invalid_value_keeps_current(self, nvim: MagicMock) -> None:
    nvim.vars["overlength_margin"] = -3
    current = Settings(margin=6)

    assert load_settings(nvim, current) is current


class TestOverLengthPlugin:
  def test_cursor_move_highlights_window(self, nvim: MagicMock) -> None:
    plugin = OverLengthPlugin(nvim)

    plugin.on_cursor_moved()

    assert nvim.funcs.matchadd.call_count == 2
    nvim.command.assert_any_call("highlight default link OverLengthError ErrorMsg")

  def test_repeated_cursor_moves_are_idempotent(self, nvim: MagicMock) -> None:
    plugin = OverLengthPlugin(nvim)

    for _ in range(5):
      plugin.on_cursor_moved()

    assert nvim.funcs.matchadd.call_count == 2
    nvim.funcs.matchdelete.assert_not_called()

  def test_margin_variable_change_rebuilds_matches(self, nvim: MagicMock) -> None:
    plugin = OverLengthPlugin(nvim)
    plugin.on_cursor_moved()
    nvim.vars["overlength_margin"] = 4

    plugin.on_cursor_moved()

    assert nvim.funcs.matchdelete.call_args_list == [call(11, 1000), call(12, 1000)]
    assert nvim.funcs.matchadd.call_args_list[-2] == call(
      "OverLengthWarning", r"\%>80v\%<85v.", 10, -1, {"window": 1000}
    )

  def test_textwidth_change_rebuilds_matches(self, nvim: MagicMock) -> None:
    plugin = OverLengthPlugin(nvim)
    plugin.on_cursor_moved()
    nvim.options["textwidth"] = 0

    plugin.on_textwidth_set()

    assert nvim.funcs.matchdelete.call_count == 2
    assert nvim.funcs.matchadd.call_count == 2

  def test_toggle_window(self, nvim: MagicMock) -> None:
    plugin = OverLengthPlugin(nvim)
    plugin.on_cursor_moved()

    plugin.toggle_window()

    assert nvim.funcs.matchdelete.call_count == 2
    assert plugin.enabled([]) == 0

  def test_toggle_all_writes_variable(self, nvim: MagicMock) -> None:
    plugin = OverLengthPlugin(nvim)
    plugin.on_cursor_moved()

    plugin.toggle_all()
    assert nvim.vars["overlength_enabled"] == 0
    assert nvim.funcs.matchdelete.call_count == 2

    plugin.toggle_all()
    assert nvim.vars["overlength_enabled"] == 1
    assert nvim.funcs.matchadd.call_count == 4

  def test_global_variable_disables_on_next_move(self, nvim: MagicMock) -> None:
    plugin = OverLengthPlugin(nvim)
    plugin.on_cursor_moved()
    nvim.vars["overlength_enabled"] = 0

    plugin.on_cursor_moved()

    assert nvim.funcs.matchdelete.call_count == 2

  def test_status_function(self, nvim: MagicMock) -> None:
    assert OverLengthPlugin(nvim).status([]) == "#1 $85"

  def test_win_closed_forgets_window(self, nvim: MagicMock) -> None:
    plugin = OverLengthPlugin(nvim)
    plugin.toggle_window()
    assert plugin.enabled([]) == 0

    plugin.on_win_closed("1000")

    assert plugin.enabled([]) == 1
    nvim.funcs.matchdelete.assert_not_called()

  def test_invalid_variable_is_reported(self, nvim: MagicMock) -> None:
    plugin = OverLengthPlugin(nvim)
    nvim.vars["overlength_margin"] = "wide"

    plugin.on_cursor_moved()

    assert nvim.err_write.called
    assert plugin.highlighter.settings.margin == 10

  @pytest.mark.parametrize("fmt", ["{lines} long", "#{count"])
  def test_invalid_status_format_keeps_current(self, nvim: MagicMock, fmt: str) -> None:
    plugin = OverLengthPlugin(nvim)
    nvim.vars["overlength_status_format"] = fmt

    plugin.on_cursor_moved()

    assert plugin.status([]) == "#1 $85"
    assert nvim.err_write.called

  def test_status_reads_format_variable(self, nvim: MagicMock) -> None:
    plugin = OverLengthPlugin(nvim)
    plugin.on_cursor_moved()
    nvim.vars["overlength_status_format"] = "{count} long"

    assert plugin.status([]) == "1 long"
