from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from strmatch.search.pattern import Pattern
    from strmatch.search.text import TextView


class StringMatchError(Exception):
    """Base exception for search-related errors."""
    pass


class InvalidPattern(StringMatchError, ValueError):
    """Raised when a pattern has no bytes to search for."""
    pass


class InvalidSearch(StringMatchError, ValueError):
    """Raised when a search cannot be performed (text shorter than pattern)."""
    pass


class UnknownAlgorithm(StringMatchError, ValueError):
    """Raised when an algorithm name is not in the registry."""
    pass


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a single ``Matcher.find`` call.

    Attributes:
        found (Optional[int]): Index of the first occurrence at or after the
            queried position, or None when no further occurrence exists.
        next_search_position (int): Where the next call should start. Always
            ``found + 1`` on a match so overlapping occurrences stay reachable.
        resume_state (Any): Algorithm-private state to feed into the next call.
        comparisons (int): Byte comparisons performed by this call.
    """
    found: Optional[int]
    next_search_position: int
    resume_state: Any = None
    comparisons: int = 0


class Matcher(ABC):
    """
    Matcher Abstract Base Class

    Defines the find-next contract shared by every search algorithm. A matcher
    holds no per-search state: everything that must survive between two calls
    travels in ``MatchResult.resume_state`` and is handed back by the caller.
    Instances are therefore safe to share between sessions and threads.

    Attributes:
        name (str): Registry key of the algorithm.

    Abstract Methods:
        _scan(text, pattern, position, resume_state):
            Runs the algorithm from ``position``. Only called once the shared
            preconditions hold, so ``position + pattern.length <= text.length``.
            Returns:
                MatchResult: The first occurrence at or after ``position``.

    Methods:
        find(text, pattern, position, resume_state):
            Validates the search bounds and dispatches to ``_scan``.
        initial_state():
            Returns the resume state a fresh search starts with.
    """
    name: str = ""

    def initial_state(self) -> Any:
        return None

    def find(self, text: "TextView", pattern: "Pattern", position: int = 0,
             resume_state: Any = None) -> MatchResult:
        """
        Find the first occurrence of ``pattern`` in ``text`` at or after ``position``.

        Args:
            text (TextView): The buffer to search.
            pattern (Pattern): The preprocessed pattern.
            position (int): First candidate start index.
            resume_state (Any): State returned by the previous call of the same
                search, or None for a fresh search.

        Returns:
            MatchResult: ``found`` is None when no occurrence is left.
        """
        m = pattern.length
        n = text.length
        # length check has to come first, n - m is only meaningful when n >= m
        if m == 0 or n < m or position < 0 or position > n - m:
            return MatchResult(None, position, resume_state)
        return self._scan(text, pattern, position, resume_state)

    @abstractmethod
    def _scan(self, text: "TextView", pattern: "Pattern", position: int,
              resume_state: Any) -> MatchResult:
        pass

    def _found(self, index: int, comparisons: int, resume_state: Any = None) -> MatchResult:
        return MatchResult(index, index + 1, resume_state, comparisons)

    def _not_found(self, position: int, comparisons: int, resume_state: Any = None) -> MatchResult:
        return MatchResult(None, position, resume_state, comparisons)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
