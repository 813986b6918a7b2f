"""Unit tests for the console helpers (polkadot_starter.utils).

Tests cover:
- print_step / print_success / print_warning / print_error output
- Markup characters in messages printed literally
- print_summary_table rows and title
"""

from __future__ import annotations

import pytest

from polkadot_starter.utils import (
    print_error,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
)


class TestRichOutputHelpers:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "helper", [print_step, print_success, print_warning, print_error]
    )
    def test_prints_message(self, capsys, helper):
        helper("Cloning repository")
        assert capsys.readouterr().out == "Cloning repository\n"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "helper", [print_step, print_success, print_warning, print_error]
    )
    def test_markup_is_printed_literally(self, capsys, helper):
        helper("Failed: [/] and [bold]x[/bold]")
        assert capsys.readouterr().out == "Failed: [/] and [bold]x[/bold]\n"

    @pytest.mark.unit
    def test_print_summary_table(self, capsys):
        print_summary_table(
            {"Project directory": "/work/demo", "Valid": "no"},
            title="Frontend Prerequisites",
        )
        out = capsys.readouterr().out
        assert "Frontend Prerequisites" in out
        assert "Project directory" in out
        assert "/work/demo" in out
        assert "Valid" in out

    @pytest.mark.unit
    def test_summary_table_values_are_not_markup(self, capsys):
        print_summary_table({"Problem 1": "Missing [/] tool"})
        out = capsys.readouterr().out
        assert "Summary" in out
        assert "Missing [/] tool" in out

    @pytest.mark.unit
    def test_summary_table_stringifies_values(self, capsys):
        print_summary_table({"Errors": 3})
        assert "3" in capsys.readouterr().out
