from typing import Any

from strmatch.search.base import Matcher, MatchResult


class BlockMatcher(Matcher):
    """
    Compares every candidate window with one block equality test.

    Logically the same as the naive scan, but the comparison is delegated to
    ``memoryview`` slice equality. The cost model charges the whole window for
    each candidate, since a block primitive gives no early exit.
    """
    name = "block"

    def _scan(self, text, pattern, position: int, resume_state: Any) -> MatchResult:
        t = text.data
        p = pattern.data
        m = pattern.length
        last = text.length - m
        comparisons = 0

        for i in range(position, last + 1):
            comparisons += m
            if t[i:i + m] == p:
                return self._found(i, comparisons)

        return self._not_found(last + 1, comparisons)
