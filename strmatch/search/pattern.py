from typing import Tuple

from strmatch.search.base import InvalidPattern
from strmatch.search.preprocess import build_bad_char_table, compute_lps, has_distinct_bytes
from strmatch.search.text import BytesLike


class Pattern:
    """
    Immutable search pattern with its derived tables.

    The KMP failure table, the BMH bad-character table and the distinct-bytes
    flag are computed once here and never change afterwards, so one pattern can
    back any number of sessions, on any number of threads.

    Args:
        data (bytes | bytearray | memoryview | str): The bytes to look for.
            A ``str`` is encoded with ``encoding``.
        encoding (str, optional): Used only for ``str`` input. Defaults to utf-8.

    Raises:
        InvalidPattern: If ``data`` is empty.

    Attributes:
        data (bytes): Private copy of the pattern bytes.
        length (int): Pattern length, always >= 1.
        lps (Tuple[int, ...]): KMP failure table, one entry per byte.
        bad_char (Tuple[int, ...]): 256 BMH shift distances.
        all_distinct (bool): True when no byte value repeats.
    """
    __slots__ = ("_data", "_lps", "_bad_char", "_all_distinct")

    def __init__(self, data, encoding: str = "utf-8"):
        if isinstance(data, Pattern):
            data = data.data
        elif isinstance(data, str):
            data = data.encode(encoding)
        data = bytes(data)
        if not data:
            raise InvalidPattern("Pattern must contain at least one byte")

        self._data = data
        self._lps: Tuple[int, ...] = tuple(compute_lps(data))
        self._bad_char: Tuple[int, ...] = tuple(build_bad_char_table(data))
        self._all_distinct = has_distinct_bytes(data)

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def lps(self) -> Tuple[int, ...]:
        return self._lps

    @property
    def bad_char(self) -> Tuple[int, ...]:
        return self._bad_char

    @property
    def all_distinct(self) -> bool:
        return self._all_distinct

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other) -> bool:
        if isinstance(other, Pattern):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Pattern({self._data!r})"


def as_pattern(value: "Pattern | BytesLike | str") -> Pattern:
    """Return ``value`` unchanged if it is a Pattern, otherwise preprocess it."""
    if isinstance(value, Pattern):
        return value
    return Pattern(value)
