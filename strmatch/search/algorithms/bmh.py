from typing import Any, Sequence, Tuple

from strmatch.search.base import Matcher, MatchResult
from strmatch.search.compare import compare_backward, compare_raita


class BMHMatcher(Matcher):
    """
    Boyer-Moore-Horspool string search algorithm implementation.

    Each candidate window is compared back to front. On a mismatch the window
    slides by the bad-character shift of the text byte under the pattern's last
    position (``Pattern.bad_char``), which is never less than one. No state is
    carried between calls.

    Performance characteristics:
        - Preprocessing: O(m + 256), done once by ``Pattern``
        - Time complexity: O(n / m) best case, O(n * m) worst case
        - Resume state: none
    """
    name = "bmh"

    def _compare(self, text: Sequence[int], start: int, pattern: Sequence[int]) -> Tuple[bool, int]:
        return compare_backward(text, start, pattern)

    def _scan(self, text, pattern, position: int, resume_state: Any) -> MatchResult:
        t = text.data
        p = pattern.data
        shift = pattern.bad_char
        m = pattern.length
        last = text.length - m
        comparisons = 0

        i = position
        while i <= last:
            equal, compared = self._compare(t, i, p)
            comparisons += compared
            if equal:
                return self._found(i, comparisons)
            i += shift[t[i + m - 1]]

        return self._not_found(i, comparisons)


class RaitaMatcher(BMHMatcher):
    """Horspool shifts with Raita's middle/first/last window check."""
    name = "raita"

    def _compare(self, text: Sequence[int], start: int, pattern: Sequence[int]) -> Tuple[bool, int]:
        return compare_raita(text, start, pattern)
