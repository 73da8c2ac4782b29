"""Closed set of search algorithms, keyed by name."""

from typing import Dict, List

from strmatch.search.algorithms.block import BlockMatcher
from strmatch.search.algorithms.bmh import BMHMatcher, RaitaMatcher
from strmatch.search.algorithms.distinct import DistinctMatcher
from strmatch.search.algorithms.ends_first import EndsFirstMatcher
from strmatch.search.algorithms.kmp import KMPMatcher
from strmatch.search.algorithms.naive import NaiveMatcher
from strmatch.search.base import Matcher, UnknownAlgorithm

REFERENCE_ALGORITHM = "naive"

# matchers are stateless, one shared instance per algorithm
_MATCHERS: Dict[str, Matcher] = {
    matcher.name: matcher
    for matcher in (
        NaiveMatcher(),
        DistinctMatcher(),
        EndsFirstMatcher(),
        BlockMatcher(),
        KMPMatcher(),
        BMHMatcher(),
        RaitaMatcher(),
    )
}


def available_algorithms() -> List[str]:
    """Return the registered algorithm names, reference algorithm first."""
    return list(_MATCHERS)


def get_matcher(name: str) -> Matcher:
    """
    Look up a matcher by name (case-insensitive).

    Raises:
        UnknownAlgorithm: If no algorithm is registered under ``name``.
    """
    try:
        return _MATCHERS[name.strip().lower()]
    except (KeyError, AttributeError):
        raise UnknownAlgorithm(
            f"Invalid search algorithm '{name}'. "
            f"Valid options: {', '.join(sorted(_MATCHERS))}"
        ) from None
