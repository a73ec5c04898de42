"""Unit tests for console formatting helpers."""

import io

import logsweep.utils.formatting as fmt_mod
import pytest
from logsweep.utils.formatting import THEME, print_error, print_info, print_warning
from rich.console import Console


@pytest.fixture
def buffers(monkeypatch: pytest.MonkeyPatch) -> tuple[io.StringIO, io.StringIO]:
    """Redirect the stdout and stderr consoles to buffers."""
    out, err = io.StringIO(), io.StringIO()
    monkeypatch.setattr(fmt_mod, "console", Console(theme=THEME, file=out, color_system=None))
    monkeypatch.setattr(fmt_mod, "err_console", Console(theme=THEME, file=err, color_system=None))
    return out, err


def test_info_goes_to_stdout(buffers: tuple[io.StringIO, io.StringIO]) -> None:
    out, err = buffers

    print_info("Dry-run: no files were modified.")

    assert out.getvalue() == "Dry-run: no files were modified.\n"
    assert err.getvalue() == ""


def test_warning_and_error_go_to_stderr(buffers: tuple[io.StringIO, io.StringIO]) -> None:
    out, err = buffers

    print_warning("log file unavailable")
    print_error("config missing")

    assert out.getvalue() == ""
    assert "Warning: log file unavailable" in err.getvalue()
    assert "Error: config missing" in err.getvalue()


def test_theme_defines_report_styles() -> None:
    for style in ("muted", "bold_header", "border", "error", "warning", "info"):
        assert style in THEME.styles
