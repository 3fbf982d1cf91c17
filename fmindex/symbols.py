from functools import total_ordering

from fmindex.config import SENTINEL_GLYPH


@total_ordering
class _SentinelType(object):
    """Marks the rotation with no predecessor. Sorts before every Symbol."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other):
        return other is self

    def __lt__(self, other):
        return other is not self

    def __hash__(self):
        return hash(_SentinelType)

    def __repr__(self):
        return "SENTINEL"

    def __reduce__(self):
        return (_SentinelType, ())


SENTINEL = _SentinelType()


@total_ordering
class Symbol(object):
    __slots__ = ("_value",)

    def __init__(self, value):
        self._value = value

    @property
    def value(self):
        return self._value

    def __eq__(self, other):
        if isinstance(other, Symbol):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Symbol):
            return self._value < other._value
        if other is SENTINEL:
            return False
        return NotImplemented

    def __hash__(self):
        return hash((Symbol, self._value))

    def __repr__(self):
        return f"Symbol({self._value!r})"


def is_sentinel(item):
    return item is SENTINEL


def terminate(sequence):
    """Wrap every element and append the sentinel."""
    return [Symbol(x) for x in sequence] + [SENTINEL]


def glyph(item, sentinel_glyph=SENTINEL_GLYPH):
    if item is SENTINEL:
        return sentinel_glyph
    value = item.value
    if isinstance(value, int):
        return chr(value) if 32 <= value < 127 else f"\\x{value:02x}"
    return str(value)
