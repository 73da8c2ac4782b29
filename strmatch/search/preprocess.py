"""Per-pattern preprocessing tables.

Each function is independent of the matcher that ends up consuming its result
and is a safe no-op on an empty pattern.
"""

from typing import List, Sequence

ALPHABET_SIZE = 256


def compute_lps(pattern: Sequence[int]) -> List[int]:
    """
    Build the KMP failure table.

    ``lps[i]`` is the length of the longest proper prefix of ``pattern[0..i]``
    that is also a suffix of it.

    Args:
        pattern (Sequence[int]): Pattern bytes.

    Returns:
        List[int]: One entry per pattern byte, ``[]`` for an empty pattern.
    """
    length = len(pattern)
    lps = [0] * length

    len_prev_lps = 0
    i = 1
    while i < length:
        if pattern[i] == pattern[len_prev_lps]:
            len_prev_lps += 1
            lps[i] = len_prev_lps
            i += 1
        elif len_prev_lps > 0:
            # i stays put, retry against the shorter border
            len_prev_lps = lps[len_prev_lps - 1]
        else:
            lps[i] = 0
            i += 1

    return lps


def build_bad_char_table(pattern: Sequence[int]) -> List[int]:
    """
    Build the Boyer-Moore-Horspool shift table.

    For every byte value the table holds the distance from its last occurrence
    in ``pattern[:-1]`` to the end of the pattern. Bytes that do not occur there
    shift by the whole pattern length, so every entry is at least 1.

    Args:
        pattern (Sequence[int]): Pattern bytes.

    Returns:
        List[int]: 256 shift distances (all zero for an empty pattern).
    """
    pattern_length = len(pattern)
    table = [pattern_length] * ALPHABET_SIZE
    for i in range(pattern_length - 1):
        table[pattern[i]] = pattern_length - 1 - i
    return table


def has_distinct_bytes(pattern: Sequence[int]) -> bool:
    """Return True when no byte value occurs twice in ``pattern``."""
    seen = [0] * ALPHABET_SIZE
    for byte in pattern:
        seen[byte] += 1
        if seen[byte] > 1:
            return False
    return True
