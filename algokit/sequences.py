"""Algorithms over sequences: swaps, medians, threshold counts, partitions."""

from __future__ import annotations

import heapq
import math
import string
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence


class ThresholdCounter:
    """Counts values above a threshold in index ranges, using square-root blocks."""

    def __init__(self, values: Iterable[int], k: int) -> None:
        self._values = list(values)
        self.k = k
        self._block = math.isqrt(len(self._values)) + 1
        self._counts = [
            self._above(start, start + self._block)
            for start in range(0, len(self._values), self._block)
        ]

    def __len__(self) -> int:
        return len(self._values)

    def _above(self, start: int, stop: int) -> int:
        return sum(value > self.k for value in self._values[start:stop])

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")

    def update(self, index: int, value: int) -> None:
        """Set the value at ``index``."""
        self._check(index)
        was_above = self._values[index] > self.k
        is_above = value > self.k
        if was_above != is_above:
            self._counts[index // self._block] += 1 if is_above else -1
        self._values[index] = value

    def count(self, left: int, right: int) -> int:
        """How many values in ``left..right`` (inclusive) exceed the threshold."""
        self._check(left)
        self._check(right)
        if left > right:
            raise ValueError("left bound exceeds right bound")
        first, last = left // self._block, right // self._block
        if first == last:
            return self._above(left, right + 1)
        return (
            self._above(left, (first + 1) * self._block)
            + sum(self._counts[first + 1 : last])
            + self._above(last * self._block, right + 1)
        )


def min_swaps(values: Sequence[int]) -> int:
    """Fewest swaps of two elements that sort ``values``."""
    items = list(values)
    origins = sorted(range(len(items)), key=lambda i: (items[i], i))
    seen = [False] * len(items)
    swaps = 0
    for position, origin in enumerate(origins):
        if seen[position] or origin == position:
            continue
        length = 0
        current = position
        while not seen[current]:
            seen[current] = True
            length += 1
            current = origins[current]
        swaps += length - 1
    return swaps


def running_medians(values: Iterable[int]) -> list[int]:
    """Median of every prefix of ``values``, truncated to an integer."""
    numbers = iter(values)
    first = next(numbers, None)
    if first is None:
        return []
    lower = [-first]  # max-heap through negation
    upper: list[int] = []
    median = float(first)
    medians = [int(first)]
    for value in numbers:
        if len(lower) > len(upper):
            if value < median:
                heapq.heappush(upper, -heapq.heapreplace(lower, -value))
            else:
                heapq.heappush(upper, value)
            median = (-lower[0] + upper[0]) / 2
        elif len(lower) < len(upper):
            if value > median:
                heapq.heappush(lower, -heapq.heapreplace(upper, value))
            else:
                heapq.heappush(lower, -value)
            median = (-lower[0] + upper[0]) / 2
        elif value < median:
            heapq.heappush(lower, -value)
            median = -lower[0]
        else:
            heapq.heappush(upper, value)
            median = upper[0]
        medians.append(int(median))
    return medians


def can_rearrange(text: str) -> bool:
    """Whether the lowercase letters of ``text`` can be ordered with no two equal neighbours."""
    if any(ch not in string.ascii_lowercase for ch in text):
        raise ValueError("text must hold lowercase ASCII letters only")
    heap = [(-count, -ord(ch)) for ch, count in Counter(text).items()]
    heapq.heapify(heap)
    placed = 0
    held: tuple[int, int] | None = None
    while heap:
        negative_count, key = heapq.heappop(heap)
        placed += 1
        if held is not None and held[0] < 0:
            heapq.heappush(heap, held)
        held = (negative_count + 1, key)
    return placed == len(text)


def josephus(n: int, k: int) -> int:
    """Position (from 1) of the survivor when every ``k``-th of ``n`` people is removed."""
    if n < 1:
        raise ValueError("the circle needs at least one person")
    if k < 1:
        raise ValueError("step must be positive")
    survivor = 0
    for size in range(1, n + 1):
        survivor = (survivor + k) % size
    return survivor + 1


def _segmentations(text: str, vocabulary: frozenset[str]) -> Iterator[str]:
    for end in range(1, len(text) + 1):
        prefix = text[:end]
        if prefix not in vocabulary:
            continue
        if end == len(text):
            yield prefix
        else:
            for rest in _segmentations(text[end:], vocabulary):
                yield f"{prefix} {rest}"


def word_breaks(words: Iterable[str], text: str) -> list[str]:
    """Every way to split ``text`` into dictionary words, space-separated and sorted."""
    return sorted(_segmentations(text, frozenset(words)))