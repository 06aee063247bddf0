import random

import pytest

from pushswap.cli import main, run
from pushswap.parsing import ParseError
from pushswap.stacks import Item, Stacks


def _apply(numbers, moves):
    stacks = Stacks(a=[Item(n) for n in numbers])
    for move in moves:
        getattr(stacks, move)()
    return [item.number for item in stacks.a], stacks.b


def test_run_no_arguments():
    assert run([]) == []


def test_run_sorted_input_no_moves():
    assert run(["1", "2", "3", "10"]) == []


def test_run_two_numbers():
    assert run(["2", "1"]) == ["sa"]


def test_run_single_quoted_argument():
    moves = run(["3 2 1"])
    assert _apply([3, 2, 1], moves) == ([1, 2, 3], [])


def test_run_large_input_sorts():
    numbers = random.Random(7).sample(range(-300, 300), 120)
    moves = run([str(n) for n in numbers])
    assert _apply(numbers, moves) == (sorted(numbers), [])


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], ["2147483648"], [""], ["-"], ["1", "2x"], ["3 -3 3"]],
)
def test_run_rejects_bad_input(args):
    with pytest.raises(ParseError):
        run(args)


def test_main_prints_moves(capsys):
    assert main(["2", "1"]) == 0
    out = capsys.readouterr()
    assert out.out == "sa\n"
    assert out.err == ""


def test_main_error_message(capsys):
    assert main(["1", "1"]) == 1
    out = capsys.readouterr()
    assert out.err == "Error\n"
    assert out.out == ""


def test_main_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_output_replays_to_sorted(capsys):
    numbers = [5, -2, 9, 0, 3, 7, 1]
    assert main([str(n) for n in numbers]) == 0
    moves = capsys.readouterr().out.split()
    assert _apply(numbers, moves) == (sorted(numbers), [])