"""
Tests for the command line entry point (gray_visualizer/main.py).

Only the --print path and argument validation; the window is covered in test_gui.py.
"""

import pytest

from gray_visualizer.main import build_parser, format_table, main


def _rows(text):
    return [line.split() for line in text.splitlines()[1:]]


class TestFormatTable:

    def test_two_bit_table(self):
        rows = _rows(format_table(2))
        assert rows == [
            ['0', '00', '0', '-'],
            ['1', '01', '1', '1'],
            ['2', '11', '3', '0'],
            ['3', '10', '2', '1'],
        ]

    def test_header(self):
        header = format_table(3).splitlines()[0].split()
        assert header == ['Step', 'Gray', 'Dec', 'Changed']

    def test_row_count(self):
        assert len(_rows(format_table(5))) == 32


class TestPrintMode:

    def test_print_writes_table(self, capsys):
        assert main(["--print", "--bits", "3"]) == 0
        out = capsys.readouterr().out
        assert "101" in out
        assert len(out.strip().splitlines()) == 9

    def test_print_allows_one_bit(self, capsys):
        assert main(["--print", "--bits", "1"]) == 0
        assert len(capsys.readouterr().out.strip().splitlines()) == 3

    @pytest.mark.parametrize("bits", ["0", "17"])
    def test_print_rejects_out_of_range(self, bits):
        with pytest.raises(SystemExit):
            main(["--print", "--bits", bits])


class TestArgumentValidation:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.bits == 3
        assert args.speed == 1000
        assert args.tab == 'visualization'
        assert not args.print_table

    @pytest.mark.parametrize("argv", [
        ["--bits", "1"],
        ["--bits", "7"],
        ["--speed", "100"],
        ["--speed", "2200"],
    ])
    def test_gui_rejects_out_of_range(self, argv):
        with pytest.raises(SystemExit):
            main(argv)

    def test_unknown_tab(self):
        with pytest.raises(SystemExit):
            main(["--tab", "settings"])
