"""
Byte-string and text front ends for the BWT and FM-index.

Bytes are transformed as sequences of ints 0..255. Text goes through
UTF-8 first and comes back wrapped in TextBWT, so that only a column
produced from text is ever decoded back into text.
"""
from dataclasses import dataclass
from typing import List

from fmindex.bwt import inverse_bwt, to_bwt
from fmindex.config import SENTINEL_GLYPH
from fmindex.exceptions import InvalidTextError
from fmindex.fm_index import FMIndex, build_fm_index
from fmindex.suffix_array import build_suffix_array
from fmindex.symbols import glyph, terminate


def bytes_to_bwt(data: bytes, method=None) -> List:
    return to_bwt(bytes(data), method=method)


def bytes_from_bwt(bwt) -> bytes:
    return bytes(inverse_bwt(bwt))


@dataclass(frozen=True)
class TextBWT:
    bwt: tuple


def text_to_bwt(text: str, method=None) -> TextBWT:
    return TextBWT(tuple(bytes_to_bwt(text.encode("utf-8"), method=method)))


def text_from_bwt(text_bwt: TextBWT) -> str:
    if not isinstance(text_bwt, TextBWT):
        raise TypeError(f"expected TextBWT, got {type(text_bwt).__name__}")
    raw = bytes_from_bwt(list(text_bwt.bwt))
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidTextError(f"inverted BWT is not valid UTF-8: {exc.reason}") from exc


def bytes_to_fm_index(data: bytes, method=None) -> FMIndex:
    return build_fm_index(bytes_to_bwt(data, method=method))


def text_to_fm_index(text: str, method=None) -> FMIndex:
    return bytes_to_fm_index(text.encode("utf-8"), method=method)


def bwt_matrix(sequence, method=None):
    """All rotations of the sentinel-terminated sequence, in sorted order.

    The last column of the matrix is the BWT. Meant for display; the
    transform itself never materialises the rotations.
    """
    if len(sequence) == 0:
        return []
    T = terminate(sequence)
    n = len(T)
    return [[T[(start + t) % n] for t in range(n)] for start in build_suffix_array(T, method=method)]


def format_bwt_matrix(matrix, sentinel_glyph=SENTINEL_GLYPH):
    lines = []
    for i, row in enumerate(matrix, start=1):
        cells = [glyph(item, sentinel_glyph) for item in row]
        lines.append(f"{i:>4} | {cells[0]} | {' '.join(cells[1:-1])} | {cells[-1]}")
    return "\n".join(lines)
