"""Window comparison primitives.

Each primitive compares ``pattern`` against ``text[start:start + len(pattern)]``
and returns ``(equal, comparisons)``, where ``comparisons`` is the number of
byte pairs it looked at. Callers guarantee the window lies inside ``text``.
"""

from typing import Optional, Sequence, Tuple


def compare_forward(text: Sequence[int], start: int, pattern: Sequence[int],
                    first: int = 0, last: Optional[int] = None) -> Tuple[bool, int]:
    """Compare ``pattern[first..last]`` front to back, stopping on the first mismatch."""
    if last is None:
        last = len(pattern) - 1
    comparisons = 0
    j = first
    while j <= last:
        comparisons += 1
        if text[start + j] != pattern[j]:
            return False, comparisons
        j += 1
    return True, comparisons


def compare_backward(text: Sequence[int], start: int, pattern: Sequence[int],
                     first: int = 0, last: Optional[int] = None) -> Tuple[bool, int]:
    """Compare ``pattern[first..last]`` back to front, stopping on the first mismatch."""
    if last is None:
        last = len(pattern) - 1
    comparisons = 0
    j = last
    while j >= first:
        comparisons += 1
        if text[start + j] != pattern[j]:
            return False, comparisons
        j -= 1
    return True, comparisons


def compare_ends_first(text: Sequence[int], start: int, pattern: Sequence[int]) -> Tuple[bool, int]:
    """Check the first and last byte, then the interior front to back."""
    length = len(pattern)
    if text[start] != pattern[0]:
        return False, 1
    if length == 1:
        return True, 1
    if text[start + length - 1] != pattern[length - 1]:
        return False, 2
    equal, comparisons = compare_forward(text, start, pattern, 1, length - 2)
    return equal, comparisons + 2


def compare_raita(text: Sequence[int], start: int, pattern: Sequence[int]) -> Tuple[bool, int]:
    """
    Raita's window check: middle byte, first byte, last byte, then the interior
    back to front. The middle byte is only probed for windows of 3 or more.
    """
    length = len(pattern)
    comparisons = 0
    if length >= 3:
        mid = length // 2
        comparisons += 1
        if text[start + mid] != pattern[mid]:
            return False, comparisons
    comparisons += 1
    if text[start] != pattern[0]:
        return False, comparisons
    if length >= 2:
        comparisons += 1
        if text[start + length - 1] != pattern[length - 1]:
            return False, comparisons
    if length < 3:
        return True, comparisons
    equal, inner = compare_backward(text, start, pattern, 1, length - 2)
    return equal, comparisons + inner
