from typing import Any

from strmatch.search.base import Matcher, MatchResult
from strmatch.search.compare import compare_ends_first


class EndsFirstMatcher(Matcher):
    """
    Naive scan that probes the first and last pattern byte before the interior.

    Only windows whose two end bytes both match pay for an interior compare,
    which helps on texts where the pattern's boundary bytes are rare. The worst
    case is still O(n * m); this is a benchmarking variant, not a reference.
    """
    name = "endsfirst"

    def _scan(self, text, pattern, position: int, resume_state: Any) -> MatchResult:
        t = text.data
        p = pattern.data
        last = text.length - pattern.length
        comparisons = 0

        for i in range(position, last + 1):
            equal, compared = compare_ends_first(t, i, p)
            comparisons += compared
            if equal:
                return self._found(i, comparisons)

        return self._not_found(last + 1, comparisons)
