"""Tests for relsetup.output.console module."""

from __future__ import annotations

import pytest

from relsetup.output.console import MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.STEP) == "step"
        assert str(Style.DEFAULT) == "default"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_step(self) -> None:
        console = MockConsole()
        console.step("Creating .releaserc.json...")
        assert console.outputs[0].style == Style.STEP

    def test_warning_prefix(self) -> None:
        console = MockConsole()
        console.warning("git is not installed")
        assert console.messages == ["warning: git is not installed"]
        assert console.has_warning()

    def test_error_prefix(self) -> None:
        console = MockConsole()
        console.error("bad")
        assert console.has_error()
        assert console.text == "error: bad"

    def test_find(self) -> None:
        console = MockConsole()
        console.success("Tag v1.0.0 created.")
        console.success("Setup Complete!")
        console.newline()

        [record] = console.find("Tag")
        assert record.style == Style.SUCCESS


class TestRichConsole:
    def test_prints_text_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("   - Owner: [acme]")
        console.warning("missing [git]")

        out = capsys.readouterr().out
        assert "   - Owner: [acme]" in out
        assert "warning: missing [git]" in out

    def test_step_adds_blank_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.step("Installing dependencies...")

        out = capsys.readouterr().out
        assert out.startswith("\n")
        assert "Installing dependencies..." in out
