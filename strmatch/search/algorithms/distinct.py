from typing import Any

from strmatch.search.base import Matcher, MatchResult


class DistinctMatcher(Matcher):
    """
    Naive scan that exploits patterns whose bytes are all distinct.

    If ``j > 0`` bytes matched before the mismatch, ``text[i:i + j]`` equals
    ``pattern[:j]``; since ``pattern[0]`` occurs nowhere else in the pattern,
    no occurrence can start inside ``(i, i + j)`` and the scan jumps straight
    to ``i + j``. Patterns with a repeated byte fall back to single steps.
    """
    name = "distinct"

    def _scan(self, text, pattern, position: int, resume_state: Any) -> MatchResult:
        t = text.data
        p = pattern.data
        m = pattern.length
        last = text.length - m
        skip = pattern.all_distinct
        comparisons = 0

        i = position
        while i <= last:
            j = 0
            while j < m:
                comparisons += 1
                if t[i + j] != p[j]:
                    break
                j += 1
            if j == m:
                return self._found(i, comparisons)
            i += j if skip and j > 0 else 1

        return self._not_found(i, comparisons)
