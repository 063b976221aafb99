import random
from itertools import permutations

import pytest

from heroswap.sorting import (
    is_sorted,
    radix_sort,
    solve,
    sort_four_or_five,
    sort_three,
    sort_three_high,
)
from heroswap.stacks import Stacks


def _replay(ranks, operations):
    stacks = Stacks(ranks)
    for name in operations:
        getattr(stacks, name)()
    return list(stacks.a), list(stacks.b)


def test_is_sorted():
    assert is_sorted([1, 2, 3, 4])
    assert not is_sorted([2, 1, 3])
    assert not is_sorted([2, 3, 4])


def test_solve_sorted_input_gives_nothing():
    assert solve([1, 2, 3, 4, 5]) == []


def test_solve_two():
    assert solve([2, 1]) == ["sa"]


def test_sort_three_reverse():
    stacks = Stacks([3, 2, 1])
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert stacks.operations == ["sa", "rra"]


def test_sort_three_one_three_two():
    stacks = Stacks([1, 3, 2])
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert stacks.operations == ["rra", "sa"]


@pytest.mark.parametrize("ranks", list(permutations([1, 2, 3])))
def test_sort_three_all(ranks):
    stacks = Stacks(ranks)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.operations) <= 2


@pytest.mark.parametrize("ranks", list(permutations([3, 4, 5])))
def test_sort_three_high_all(ranks):
    stacks = Stacks(ranks)
    sort_three_high(stacks)
    assert list(stacks.a) == [3, 4, 5]


@pytest.mark.parametrize(
    "ranks", list(permutations([1, 2, 3, 4])) + list(permutations([1, 2, 3, 4, 5]))
)
def test_sort_four_or_five_all(ranks):
    stacks = Stacks(ranks)
    sort_four_or_five(stacks)
    assert list(stacks.a) == sorted(ranks)
    assert not stacks.b


def test_sort_four_or_five_needs_small_ranks():
    with pytest.raises(ValueError):
        sort_four_or_five(Stacks([3, 4, 5, 6]))


def test_radix_sort_all_of_six():
    for ranks in permutations(range(1, 7)):
        stacks = Stacks(ranks)
        radix_sort(stacks)
        assert list(stacks.a) == list(range(1, 7))
        assert not stacks.b


@pytest.mark.parametrize("size", [7, 16, 33, 100])
def test_radix_sort_random(size):
    rng = random.Random(size)
    ranks = rng.sample(range(1, size + 1), size)
    stacks = Stacks(ranks)
    radix_sort(stacks)
    assert list(stacks.a) == list(range(1, size + 1))
    assert not stacks.b


@pytest.mark.parametrize("size", range(2, 6))
def test_solve_replays_to_sorted_small(size):
    for ranks in permutations(range(1, size + 1)):
        operations = solve(ranks)
        a, b = _replay(ranks, operations)
        assert a == list(range(1, size + 1))
        assert b == []


@pytest.mark.parametrize("size", [6, 12, 50])
def test_solve_replays_to_sorted_large(size):
    rng = random.Random(size * 7)
    ranks = rng.sample(range(1, size + 1), size)
    operations = solve(ranks)
    a, b = _replay(ranks, operations)
    assert a == list(range(1, size + 1))
    assert b == []