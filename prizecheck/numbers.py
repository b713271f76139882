import itertools
from typing import Iterable, Sequence

from prizecheck.errors import LimitExceeded


def intersect_count(a: Iterable[str], b: Iterable[str]) -> int:
    """Count tokens of ``a`` that occur in ``b``. Repeats in ``a`` count each time."""
    members = set(b)
    return sum(1 for x in a if x in members)


def k_combinations(tokens: Sequence[str], r: int) -> list[tuple[str, ...]]:
    """
    All size-``r`` selections of ``tokens``, each in the original relative order.

    r == 0 yields a single empty selection; r > len(tokens) yields none.
    """
    return list(itertools.combinations(tokens, r))


def expand_combinations(tokens: Sequence[str], r: int, limit: int) -> list[tuple[str, ...]]:
    """Like :func:`k_combinations` but refuses to expand more than ``limit`` tokens."""
    if len(tokens) > limit:
        raise LimitExceeded(len(tokens), limit)
    return k_combinations(tokens, r)

