"""Tests for tinybn/cli.py."""

import argparse

import pytest

from tinybn.cli import OPERATIONS, main, operation_name, run_check


class TestOperationName:
    def test_by_name(self):
        assert operation_name("mul") == "mul"
        assert operation_name(" ISQRT ") == "isqrt"

    def test_by_number(self):
        assert operation_name("0") == "add"
        assert operation_name("3") == "div"
        assert operation_name("11") == "isqrt"

    def test_numbers_cover_every_operation(self):
        assert sorted(number for number, _ in OPERATIONS.values()) == list(range(12))

    def test_unknown(self):
        with pytest.raises(argparse.ArgumentTypeError):
            operation_name("12")
        with pytest.raises(argparse.ArgumentTypeError):
            operation_name("sqrt")


class TestCheck:
    @pytest.mark.parametrize(
        "oper, a, b, expected",
        [
            ("0", "00000001", "00000002", "00000003"),
            ("1", "00000000", "00000001", "f" * 256),
            ("2", "000003E8", "000003E8", "000F4240"),
            ("3", "0000000000000064", "00000007", "0000000E"),
            ("4", "0000FF0F", "00000FF0", "00000F00"),
            ("5", "0000FF00", "000000FF", "0000FFFF"),
            ("6", "0000FFFF", "000000FF", "0000FF00"),
            ("7", "00000002", "0000000A", "00000400"),
            ("8", "00000064", "00000007", "00000002"),
            ("9", "11112222333344445555666677778888", "00000040", "1111222233334444"),
            ("10", "00000001", "00000020", "0000000100000000"),
            ("11", "00000090", "00000000", "0000000C"),
        ],
    )
    def test_each_operation(self, oper, a, b, expected):
        assert main(["check", oper, a, b, expected]) == 0

    def test_mismatch_reports_result(self, capsys):
        assert run_check("add", "00000001", "00000002", "00000004") == 1
        out = capsys.readouterr().out
        assert "got 3" in out
        assert "res = 3" in out

    def test_bad_hex_is_usage_error(self):
        assert main(["check", "add", "0000000Z", "00000001", "00000001"]) == 2

    def test_division_by_zero_is_usage_error(self):
        assert main(["check", "div", "00000001", "00000000", "00000000"]) == 2

    def test_unknown_operator_exits(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["check", "99", "00000001", "00000001", "00000001"])
        assert excinfo.value.code == 2


class TestFactorialCommand:
    def test_prints_digest(self, capsys):
        assert main(["factorial", "5"]) == 0
        assert "factorial(5) = 78" in capsys.readouterr().out

    def test_repeat(self, capsys):
        assert main(["factorial", "20", "--repeat", "3"]) == 0
        assert f"factorial(20) = {2432902008176640000:x}" in capsys.readouterr().out

    def test_negative_rejected(self):
        with pytest.raises(SystemExit):
            main(["factorial", "-3"])
