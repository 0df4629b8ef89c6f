"""Deduplication and cycle detection for crawled URLs and content."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

MAX_CHROME_URL_LENGTH = 2097152
MIN_SEQUENCE_LENGTH = 10
MAX_SEQUENCE_COUNT = 10


@dataclass(frozen=True)
class RepeatingSequence:
    """The longest non-overlapping repeated substring and its occurrence count."""

    sequence: str
    count: int


def longest_repeating_sequence(text: str) -> RepeatingSequence:
    """Find the longest substring occurring at least twice without overlap."""
    n = len(text)
    previous = [0] * (n + 1)
    best_length = 0
    best_end = 0
    for i in range(1, n + 1):
        current = [0] * (n + 1)
        for j in range(i + 1, n + 1):
            if text[i - 1] == text[j - 1] and previous[j - 1] < j - i:
                current[j] = previous[j - 1] + 1
                if current[j] > best_length:
                    best_length = current[j]
                    best_end = i
        previous = current
    sequence = text[best_end - best_length:best_end] if best_length else ""
    return RepeatingSequence(sequence=sequence, count=text.count(sequence))


class SimpleFilter:
    """In-memory filter remembering seen URLs and content hashes."""

    def __init__(self) -> None:
        self._seen: set[str] = set()

    def _first_time(self, key: str) -> bool:
        if key in self._seen:
            return False
        self._seen.add(key)
        return True

    def unique_url(self, url: str) -> bool:
        """Return True the first time a URL is seen."""
        return self._first_time(url)

    def unique_content(self, content: bytes) -> bool:
        """Return True the first time a body with this MD5 digest is seen."""
        return self._first_time(hashlib.md5(content).hexdigest())

    def is_cycle(self, url: str) -> bool:
        """Heuristically decide whether a URL is part of a crawl loop."""
        if len(url) > MAX_CHROME_URL_LENGTH:
            return True
        found = longest_repeating_sequence(url)
        return found.count >= MAX_SEQUENCE_COUNT and len(found.sequence) > MIN_SEQUENCE_LENGTH

    def close(self) -> None:
        """Release everything the filter remembers."""
        self._seen.clear()

    def __enter__(self) -> SimpleFilter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()