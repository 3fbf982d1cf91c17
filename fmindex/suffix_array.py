import logging
from functools import cmp_to_key

import numpy as np

from fmindex.config import DEFAULT_SUFFIX_ARRAY_METHOD, SUFFIX_ARRAY_METHODS
from fmindex.symbols import terminate

logger = logging.getLogger(__name__)


def compare_rotations(T, i, j):
    """Order the rotations of T starting at offsets i and j.

    Symbols at (i + t) mod n and (j + t) mod n are compared for
    t = 0, 1, ... until they differ. Rotations that tie on all n
    positions (periodic input) fall back to the offset itself.
    """
    if i == j:
        return 0
    n = len(T)
    for t in range(n):
        a = T[(i + t) % n]
        b = T[(j + t) % n]
        if a < b:
            return -1
        if b < a:
            return 1
    return -1 if i < j else 1


def naive_suffix_array(T):
    """Comparison sort over all rotations, O(n^2 log n) worst case."""
    indices = list(range(len(T)))
    indices.sort(key=cmp_to_key(lambda i, j: compare_rotations(T, i, j)))
    return indices


def _initial_ranks(T):
    # Dense ranks by symbol value; needs only ordering, not hashing.
    n = len(T)
    order = sorted(range(n), key=T.__getitem__)
    rank = np.zeros(n, dtype=np.int64)
    current = 0
    for k in range(1, n):
        if T[order[k - 1]] < T[order[k]]:
            current += 1
        rank[order[k]] = current
    return rank


def doubling_suffix_array(T):
    """Cyclic prefix doubling over integer ranks.

    After the round with step k, equal ranks mean equal cyclic prefixes
    of length 2k. Rounds stop once every rank is distinct or the prefix
    covers the whole rotation; remaining ties are periodic rotations and
    are ordered by offset.
    """
    n = len(T)
    if n == 0:
        return []
    rank = _initial_ranks(T)
    offsets = np.arange(n, dtype=np.int64)
    k = 1
    rounds = 0
    while rank.max() < n - 1 and k < n:
        second = rank[(offsets + k) % n]
        order = np.lexsort((second, rank))
        first_sorted = rank[order]
        second_sorted = second[order]
        changed = (first_sorted[1:] != first_sorted[:-1]) | (second_sorted[1:] != second_sorted[:-1])
        new_rank = np.empty(n, dtype=np.int64)
        new_rank[order] = np.concatenate(([0], np.cumsum(changed)))
        rank = new_rank
        k <<= 1
        rounds += 1
    logger.debug("prefix doubling finished after %d rounds for n=%d", rounds, n)
    return np.lexsort((offsets, rank)).tolist()


_BUILDERS = {
    "naive": naive_suffix_array,
    "doubling": doubling_suffix_array,
}


def build_suffix_array(T, method=None):
    """Return the offsets of T's rotations in sorted order."""
    method = method or DEFAULT_SUFFIX_ARRAY_METHOD
    if method not in SUFFIX_ARRAY_METHODS:
        raise ValueError(f"Unknown suffix array method {method!r}; expected one of {SUFFIX_ARRAY_METHODS}")
    if len(T) == 0:
        return []
    logger.debug("building suffix array of %d symbols with %s", len(T), method)
    return _BUILDERS[method](T)


def bwt_suffix_array(T, method=None):
    """Suffix array of the sentinel-terminated form of T."""
    if len(T) == 0:
        return []
    return build_suffix_array(terminate(T), method=method)
