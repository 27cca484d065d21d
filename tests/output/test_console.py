"""Tests for the Rich console factory."""

from datestr.output.console import DATESTR_THEME, create_console, get_output


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_custom_width(self) -> None:
        assert create_console(width=40).width == 40

    def test_theme_styles(self) -> None:
        for name in ("ds.ok", "ds.error", "ds.warning", "ds.date"):
            assert name in DATESTR_THEME.styles
