"""Tests for escape generation and the buffered painter."""

import io

import pytest

from conftest import strip_escapes
from diffpaint.config.resolver import get_config
from diffpaint.output.painter import Painter, background_escape, paint_text


class _FailingWriter:
    def write(self, text):
        raise BrokenPipeError("pager went away")


@pytest.fixture
def python(assets):
    return assets.find_syntax_by_extension("py")


class TestPaintText:
    def test_background_per_line(self, python, dark_config):
        buf = io.StringIO()
        paint_text("a = 1\nb = 2", python, dark_config.minus_color, dark_config, False, buf)
        out = buf.getvalue()
        assert out.startswith("\x1b[48;2;63;0;1m")
        assert out.count("\x1b[48;2;63;0;1m") == 2

    def test_no_background(self, python, dark_config):
        buf = io.StringIO()
        paint_text("a = 1", python, None, dark_config, True, buf)
        assert "\x1b[48;2;" not in buf.getvalue()

    def test_foreground_only_when_highlighting(self, python, dark_config):
        on, off = io.StringIO(), io.StringIO()
        paint_text("a = 1", python, None, dark_config, True, on)
        paint_text("a = 1", python, None, dark_config, False, off)
        assert "\x1b[38;2;" in on.getvalue()
        assert off.getvalue() == "a = 1"

    def test_text_survives(self, python, dark_config):
        text = "def f(x):\n    return x  # note"
        buf = io.StringIO()
        paint_text(text, python, dark_config.plus_color, dark_config, True, buf)
        assert strip_escapes(buf.getvalue()) == text

    def test_no_reset_sequence(self, python, dark_config):
        # Colors are never reset; the next escape overrides them.
        buf = io.StringIO()
        paint_text("x = 1\ny = 2", python, dark_config.plus_color, dark_config, True, buf)
        assert "\x1b[0m" not in buf.getvalue()
        assert "\x1b[m" not in buf.getvalue()

    def test_background_escape_format(self, dark_config):
        assert background_escape(dark_config.plus_color) == "\x1b[48;2;1;59;1m"


class TestPainter:
    def test_flush_noop_when_empty(self, python, dark_config):
        out = io.StringIO()
        painter = Painter(out, dark_config, python)
        painter.paint_and_emit_buffered_lines()
        assert out.getvalue() == ""

    def test_flush_removed_then_added(self, python, dark_config):
        out = io.StringIO()
        painter = Painter(out, dark_config, python)
        painter.minus_lines.extend(["-a = 1", "-b = 2"])
        painter.plus_lines.append("+c = 3")
        painter.paint_and_emit_buffered_lines()

        lines = out.getvalue().split("\n")
        assert lines[0].startswith(background_escape(dark_config.minus_color))
        assert lines[2].startswith(background_escape(dark_config.plus_color))
        assert strip_escapes(out.getvalue()) == "-a = 1\n-b = 2\n+c = 3\n"
        assert painter.is_empty()

    def test_removed_lines_plain_unless_enabled(self, assets, python):
        plain_cfg = get_config(assets)
        colored_cfg = get_config(assets, highlight_removed=True)
        for cfg, expect_fg in ((plain_cfg, False), (colored_cfg, True)):
            out = io.StringIO()
            painter = Painter(out, cfg, python)
            painter.minus_lines.append("-x = 1")
            painter.paint_and_emit_buffered_lines()
            removed = out.getvalue().split("\n")[0]
            assert ("\x1b[38;2;" in removed) is expect_fg

    def test_added_only_emits_blank_removed_line(self, python, dark_config):
        out = io.StringIO()
        painter = Painter(out, dark_config, python)
        painter.plus_lines.append("+x = 1")
        painter.paint_and_emit_buffered_lines()
        assert out.getvalue().split("\n")[0] == ""
        assert strip_escapes(out.getvalue()) == "\n+x = 1\n"

    def test_buffer_truncated_on_write_error(self, python, dark_config):
        painter = Painter(_FailingWriter(), dark_config, python)
        with pytest.raises(BrokenPipeError):
            painter.paint_and_emit_text("x = 1", None, True)
        assert painter.output_buffer.getvalue() == ""

    def test_paint_without_syntax_raises(self, dark_config):
        out = io.StringIO()
        painter = Painter(out, dark_config)
        with pytest.raises(ValueError):
            painter.paint_and_emit_text(" a", None, True)
        assert out.getvalue() == ""

    def test_buffer_reused(self, python, dark_config):
        out = io.StringIO()
        painter = Painter(out, dark_config, python)
        buffer = painter.output_buffer
        painter.paint_and_emit_text(" a", None, True)
        painter.paint_and_emit_text(" b", None, True)
        assert painter.output_buffer is buffer
        assert buffer.getvalue() == ""
        assert strip_escapes(out.getvalue()) == " a\n b\n"
