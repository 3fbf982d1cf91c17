import logging

from fmindex.exceptions import MalformedIndexError
from fmindex.suffix_array import bwt_suffix_array
from fmindex.symbols import SENTINEL, Symbol, is_sentinel

logger = logging.getLogger(__name__)


def bwt_transform(text, suffix_array):
    """Build the BWT column of text from the suffix array of text + sentinel.

    Position i holds the symbol preceding the i-th smallest rotation. The
    rotation starting at offset 0 has no real predecessor and gets the
    sentinel; the sentinel's own rotation (offset n) is preceded by the
    last symbol of text.
    """
    n = len(text)
    if n == 0:
        return []
    if len(suffix_array) != n + 1:
        raise ValueError(
            f"suffix array must cover the sentinel-terminated text: "
            f"expected {n + 1} offsets, got {len(suffix_array)}"
        )
    if sorted(suffix_array) != list(range(n + 1)):
        raise ValueError("suffix array is not a permutation of the text offsets")

    bwt = [None] * (n + 1)
    for i in range(n + 1):
        pos = suffix_array[i] - 1
        if pos < 0:
            bwt[i] = SENTINEL
        else:
            bwt[i] = Symbol(text[pos])
    return bwt


def to_bwt(text, method=None):
    return bwt_transform(text, bwt_suffix_array(text, method=method))


def _sentinel_count(bwt):
    return sum(1 for item in bwt if is_sentinel(item))


def lf_permutation(bwt):
    """Map each rank of the sorted column back to its position in bwt.

    A stable sort on the symbol keeps equal symbols in position order,
    which is exactly the LF mapping without any C/Occ tables.
    """
    return sorted(range(len(bwt)), key=bwt.__getitem__)


def inverse_bwt(bwt):
    """Recover the original sequence from a BWT column.

    Starting from the sentinel's row (rank 0 once sorted), follow the
    LF permutation and read one symbol per step.
    """
    n = len(bwt)
    if n == 0:
        return []
    sentinels = _sentinel_count(bwt)
    if sentinels != 1:
        raise MalformedIndexError(sentinels)

    next_pos = lf_permutation(bwt)
    text = []
    r = 0
    for _ in range(n - 1):
        r = next_pos[r]
        # first-column symbol of row r
        text.append(bwt[next_pos[r]].value)
    logger.debug("inverted BWT column of length %d", n)
    return text
