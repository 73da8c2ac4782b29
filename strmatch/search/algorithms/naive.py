from typing import Any

from strmatch.search.base import Matcher, MatchResult
from strmatch.search.compare import compare_forward


class NaiveMatcher(Matcher):
    """
    Brute-force scan, the reference every other matcher is checked against.

    Every candidate start index is tried in turn; pattern bytes are compared
    front to back and a candidate is abandoned on its first mismatch.

    Performance characteristics:
        - Time complexity: O(n * m) worst case
        - Space complexity: O(1), no preprocessing consulted
        - Resume state: none

    Example:
        >>> from strmatch.search.pattern import Pattern
        >>> from strmatch.search.text import TextView
        >>> NaiveMatcher().find(TextView(b"aab"), Pattern(b"ab")).found
        1
    """
    name = "naive"

    def _scan(self, text, pattern, position: int, resume_state: Any) -> MatchResult:
        t = text.data
        p = pattern.data
        last = text.length - pattern.length
        comparisons = 0

        for i in range(position, last + 1):
            equal, compared = compare_forward(t, i, p)
            comparisons += compared
            if equal:
                return self._found(i, comparisons)

        return self._not_found(last + 1, comparisons)
