"""Name matching strategies shared by density lookup and catalog search.

Substring matching is the default: "all-purpose flour" finds the "flour"
density entry and a "milk" query finds "Whole Milk 2L". It also produces
false positives ("milk chocolate" matches "milk"), so callers take the
strategy as a parameter and can swap in a stricter one.
"""
from __future__ import annotations
from typing import Protocol


class NameMatcher(Protocol):
    def matches(self, needle: str, haystack: str) -> bool:
        """Return True when ``needle`` identifies ``haystack``."""
        ...


class SubstringNameMatcher:
    """Case-insensitive substring test."""

    def matches(self, needle: str, haystack: str) -> bool:
        n = (needle or '').strip().lower()
        if not n:
            return False
        return n in (haystack or '').lower()


class TokenNameMatcher:
    """Every whitespace-separated token of ``needle`` must be a whole word of ``haystack``."""

    def matches(self, needle: str, haystack: str) -> bool:
        tokens = (needle or '').lower().split()
        if not tokens:
            return False
        words = set((haystack or '').lower().split())
        return all(t in words for t in tokens)


DEFAULT_MATCHER: NameMatcher = SubstringNameMatcher()

__all__ = ['NameMatcher', 'SubstringNameMatcher', 'TokenNameMatcher', 'DEFAULT_MATCHER']
