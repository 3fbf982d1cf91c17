"""
FM-index tables built on top of a BWT column.

Given the BWT of "abracadabra" (sentinel shown as $):

    ard$rcaaaabb

the C table is built from the *sorted* column "$aaaaabbcdrr":

    c     $  a  b  c  d  r
    C[c]  0  1  6  8  9  10

and the Occ table from the column itself, one group per symbol with an
entry (k, Occ(c, k), c) at every 1-based position k holding c, e.g.

    a: (1, 1, a) (7, 2, a) (8, 3, a) (9, 4, a) (10, 5, a)

Distinct symbols are always enumerated in order of first occurrence in
the scanned input, never re-sorted.
"""
import logging
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from utils.utils import is_sorted, runs_in_order

logger = logging.getLogger(__name__)


class CEntry(NamedTuple):
    count: int
    symbol: object


class OccEntry(NamedTuple):
    position: int
    count: int
    symbol: object


class OccGroup(NamedTuple):
    symbol: object
    entries: Tuple[OccEntry, ...]


@dataclass(frozen=True)
class FMIndex:
    c_table: Tuple[CEntry, ...]
    occ_table: Tuple[OccGroup, ...]


def build_c_table(sequence):
    """Count, per distinct symbol, the elements before its first occurrence.

    The caller must pass a sequence sorted by symbol value (the sorted BWT
    column) for the counts to mean "number of smaller symbols". Unsorted
    input is accepted and yields a consistent table without that meaning.
    """
    if not sequence:
        return ()
    if not is_sorted(sequence):
        logger.warning("C table built from unsorted input; counts are first-occurrence offsets only")
    return tuple(CEntry(run[0], sequence[run[0]]) for run in runs_in_order(sequence))


def build_occ_table(sequence):
    if not sequence:
        return ()

    table = []
    for run in runs_in_order(sequence):
        item = sequence[run[0]]
        # run holds 0-based positions in increasing order
        entries = tuple(OccEntry(k + 1, count, item) for count, k in enumerate(run, start=1))
        table.append(OccGroup(item, entries))
    return tuple(table)


def build_fm_index(bwt):
    """Build both tables from one BWT column."""
    c_table = build_c_table(sorted(bwt))
    occ_table = build_occ_table(bwt)
    logger.debug("FM-index over %d symbols, %d distinct", len(bwt), len(c_table))
    return FMIndex(c_table, occ_table)


def extract(fm_index):
    """Project the symbols recorded in the first Occ group.

    Only the positions of the first distinct symbol are recovered; this is
    not an inverse of the whole index.
    """
    if not fm_index.c_table or not fm_index.occ_table:
        return []
    first_group = fm_index.occ_table[0]
    return [entry.symbol for entry in first_group.entries]
