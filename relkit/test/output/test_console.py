"""Tests for relkit.output.console module."""

from __future__ import annotations

import pytest

from relkit.output.console import MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.WARNING) == "warning"


class TestMockConsole:
    def test_records_message_and_style(self) -> None:
        console = MockConsole()
        console.success("created")
        console.warning("exists")

        assert console.messages == ["OK created", "warning: exists"]
        assert [o.style for o in console.outputs] == [Style.SUCCESS, Style.WARNING]
        assert console.has_success()
        assert console.has_warning()

    def test_empty_console_has_nothing(self) -> None:
        console = MockConsole()
        assert not console.has_success()
        assert not console.has_warning()


class TestRichConsole:
    def test_prints_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.success("milestone 1.2.3")
        console.warning("milestone [1.2.3] already exists")

        out = capsys.readouterr().out
        assert "OK milestone 1.2.3" in out
        assert "warning: milestone [1.2.3] already exists" in out
