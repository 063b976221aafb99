import pytest

from heroswap.cli import main
from heroswap.parsing import rank
from heroswap.stacks import Stacks


def _replay(values, output):
    stacks = Stacks(rank(values))
    for line in output.splitlines():
        getattr(stacks, line)()
    return stacks


def test_no_arguments_gives_status_one(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_two_numbers_swapped(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_already_sorted_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [
        ["3", "1", "2"],
        ["4 2 1 3"],
        ["5", "-1", "3", "0", "9"],
        ["10 -3 7 8 2 1 55 -20"],
        [str(n) for n in (42, 7, 19, -5, 100, 3, 64, 11, 0, 28, 90, -12)],
    ],
)
def test_output_sorts_the_numbers(capsys, args):
    assert main(args) == 0
    output = capsys.readouterr().out
    values = [int(token) for arg in args for token in arg.split()]
    stacks = _replay(values, output)
    assert list(stacks.a) == sorted(rank(values))
    assert not stacks.b


def test_duplicate_reports_error(capsys):
    assert main(["1", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Error\n")
    assert captured.out == ""


def test_bad_character_reports_error(capsys):
    assert main(["1", "a"]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_out_of_range_reports_error(capsys):
    assert main(["1", "2147483648"]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_single_number_is_silent_failure(capsys):
    assert main(["5"]) == 1
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_blank_argument_reports_error(capsys):
    assert main(["1", "   "]) == 1
    assert capsys.readouterr().err.startswith("Error\n")