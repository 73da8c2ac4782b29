from dataclasses import dataclass
from typing import Any

from strmatch.search.base import Matcher, MatchResult


@dataclass(frozen=True)
class KMPState:
    """
    Automaton position handed from one KMP call to the next.

    Attributes:
        resume_at (int): The search position this state is valid for, i.e. the
            ``next_search_position`` of the match that produced it.
        text_index (int): Text index the automaton had reached.
        matched (int): Automaton index, the number of pattern bytes known to
            match just before ``text_index``.
    """
    resume_at: int
    text_index: int
    matched: int


class KMPMatcher(Matcher):
    """
    KMP (Knuth-Morris-Pratt) string search algorithm implementation.

    The pattern's failure table (``Pattern.lps``) lets the automaton fall back
    on a mismatch without ever moving backwards in the text.

    A session resumes at ``found + 1`` after every match, while the automaton
    itself has already consumed the text up to the end of that match. To keep
    overlapping occurrences visible without re-scanning, every match returns a
    ``KMPState`` holding the automaton index ``lps[m - 1]`` together with the
    text index it belongs to. A later call at exactly ``state.resume_at``
    continues from there; a call at any other position, or with no state,
    restarts the automaton at ``position`` with index 0, which is slower but
    never wrong.

    Performance characteristics:
        - Preprocessing: O(m), done once by ``Pattern``
        - Time complexity: O(n + m) across a whole session
        - Resume state: ``KMPState``
    """
    name = "kmp"

    def initial_state(self) -> KMPState:
        return KMPState(resume_at=0, text_index=0, matched=0)

    def _scan(self, text, pattern, position: int, resume_state: Any) -> MatchResult:
        t = text.data
        p = pattern.data
        lps = pattern.lps
        m = pattern.length
        n = text.length
        comparisons = 0

        if isinstance(resume_state, KMPState) and resume_state.resume_at == position:
            i = resume_state.text_index  # Index for text
            j = resume_state.matched  # Index for pattern
        else:
            i = position
            j = 0

        # stop once the rest of the text cannot complete the pattern
        while n - i >= m - j:
            comparisons += 1
            if p[j] == t[i]:
                i += 1
                j += 1
                if j == m:
                    found = i - m
                    state = KMPState(resume_at=found + 1, text_index=i, matched=lps[m - 1])
                    return self._found(found, comparisons, state)
            elif j > 0:
                j = lps[j - 1]
            else:
                i += 1

        return self._not_found(n - m + 1, comparisons)
