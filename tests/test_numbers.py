from math import comb

import pytest

from prizecheck.errors import LimitExceeded
from prizecheck.numbers import intersect_count, k_combinations, expand_combinations

def test_intersect_disjoint_is_zero():
    assert intersect_count(["01", "02", "03"], ["04", "05"]) == 0
    assert intersect_count([], ["04"]) == 0

def test_intersect_subset_counts_all():
    a = ["02", "11", "15"]
    assert intersect_count(a, ["33", "15", "02", "11", "28"]) == len(a)

def test_intersect_counts_repeats_in_first_argument():
    assert intersect_count(["07", "07", "08"], ["07"]) == 2

def test_intersect_is_exact_string_match():
    assert intersect_count(["2", "02"], ["02"]) == 1

@pytest.mark.parametrize("r", range(0, 9))
def test_combination_count_and_order(r):
    tokens = ["01", "05", "09", "13", "17", "21", "25"]
    combos = k_combinations(tokens, r)
    assert len(combos) == comb(len(tokens), r)
    assert len(set(combos)) == len(combos)
    for c in combos:
        assert len(c) == r
        positions = [tokens.index(t) for t in c]
        assert positions == sorted(positions)

def test_zero_size_yields_one_empty_selection():
    assert k_combinations(["01", "02"], 0) == [()]
    assert k_combinations([], 0) == [()]

def test_too_large_selection_yields_none():
    assert k_combinations(["01", "02"], 3) == []

def test_expand_refuses_oversized_input():
    tokens = [f"{i:02d}" for i in range(1, 22)]
    with pytest.raises(LimitExceeded) as exc:
        expand_combinations(tokens, 6, limit=20)
    assert exc.value.count == 21
    assert exc.value.limit == 20

def test_expand_at_limit():
    tokens = [f"{i:02d}" for i in range(1, 9)]
    assert len(expand_combinations(tokens, 6, limit=8)) == 28
