import logging
from typing import Iterator, List, Optional, Union

from strmatch.search.base import InvalidPattern, InvalidSearch, Matcher
from strmatch.search.pattern import Pattern, as_pattern
from strmatch.search.registry import REFERENCE_ALGORITHM, get_matcher
from strmatch.search.text import BytesLike, TextView

logger = logging.getLogger("StringMatch.search")


class ScanSession:
    """
    Enumerates every occurrence of a pattern in a text, overlapping ones included.

    The session asks its matcher for the first occurrence at or after a cursor,
    emits it, then moves the cursor to ``found + 1`` and stores the matcher's
    resume state for the next call. It stops for good the first time the
    matcher reports no occurrence.

    A session is a one-shot, forward-only iterator owned by a single thread.
    Build a new one to enumerate again; that is cheap, since the pattern's
    tables are reused.

    Args:
        pattern (Pattern | bytes-like | str): The pattern, preprocessed if needed.
        text (TextView | bytes-like): The text to search.
        algorithm (str | Matcher, optional): Registry name or matcher instance.
            Defaults to the naive reference scan.

    Raises:
        InvalidPattern: If the pattern is empty.
        InvalidSearch: If the text is shorter than the pattern.
        UnknownAlgorithm: If ``algorithm`` is not a registered name.

    Example:
        >>> list(ScanSession(b"aa", b"aaaa", "kmp"))
        [0, 1, 2]
    """

    def __init__(self, pattern: Union[Pattern, BytesLike, str], text: Union[TextView, BytesLike],
                 algorithm: Union[str, Matcher] = REFERENCE_ALGORITHM):
        self.matcher = algorithm if isinstance(algorithm, Matcher) else get_matcher(algorithm)
        self.pattern = as_pattern(pattern)
        self.text = text if isinstance(text, TextView) else TextView(text)

        if self.text.length < self.pattern.length:
            raise InvalidSearch(
                f"Text of {self.text.length} bytes is shorter than "
                f"pattern of {self.pattern.length} bytes"
            )

        self.cursor = 0
        self.resume_state = self.matcher.initial_state()
        self.matches_found = 0
        self.exhausted = False
        self._stats = {
            "algorithm": self.matcher.name,
            "matches": 0,
            "calls": 0,
            "comparisons": 0,
        }
        logger.debug(
            "Session started: algorithm=%s pattern_length=%d text_length=%d",
            self.matcher.name, self.pattern.length, self.text.length
        )

    def next_match(self) -> Optional[int]:
        """
        Advance to the next occurrence.

        Returns:
            Optional[int]: Start index of the occurrence, or None once the text
            is exhausted. Never raises.
        """
        if self.exhausted:
            return None

        result = self.matcher.find(self.text, self.pattern, self.cursor, self.resume_state)
        self._stats["calls"] += 1
        self._stats["comparisons"] += result.comparisons

        if result.found is None:
            self.exhausted = True
            self.resume_state = None
            logger.debug("Session exhausted: algorithm=%s matches=%d",
                          self.matcher.name, self.matches_found)
            return None

        self.cursor = result.next_search_position
        self.resume_state = result.resume_state
        self.matches_found += 1
        self._stats["matches"] = self.matches_found
        return result.found

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        found = self.next_match()
        if found is None:
            raise StopIteration
        return found

    def get_stats(self) -> dict:
        """Return a copy of the session counters (matches, calls, comparisons)."""
        return dict(self._stats)

    def __repr__(self) -> str:
        return (
            f"ScanSession(algorithm={self.matcher.name!r}, cursor={self.cursor}, "
            f"matches_found={self.matches_found}, exhausted={self.exhausted})"
        )


def find_all(pattern: Union[Pattern, BytesLike, str], text: Union[TextView, BytesLike],
             algorithm: Union[str, Matcher] = REFERENCE_ALGORITHM) -> List[int]:
    """
    Return the start index of every occurrence of ``pattern`` in ``text``.

    Degenerate input (empty pattern, or a text shorter than the pattern) has no
    possible occurrence and yields ``[]`` instead of raising. An unknown
    algorithm name still raises ``UnknownAlgorithm``.
    """
    try:
        session = ScanSession(pattern, text, algorithm)
    except (InvalidPattern, InvalidSearch) as e:
        logger.debug("No search performed: %s", e)
        return []
    return list(session)


def count_matches(pattern: Union[Pattern, BytesLike, str], text: Union[TextView, BytesLike],
                  algorithm: Union[str, Matcher] = REFERENCE_ALGORITHM) -> int:
    """Count occurrences without materialising the index list."""
    try:
        session = ScanSession(pattern, text, algorithm)
    except (InvalidPattern, InvalidSearch) as e:
        logger.debug("No search performed: %s", e)
        return 0
    count = 0
    while session.next_match() is not None:
        count += 1
    return count
