"""String problems: windows, anagrams, zigzags and character counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for i, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = i
        best = max(best, i - start + 1)
    return best


def convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 2:
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    row, step = 0, -1
    for ch in s:
        rows[row].append(ch)
        if row in (0, num_rows - 1):
            step = -step
        row += step
    return "".join("".join(chars) for chars in rows)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def reverse_words(s: str) -> str:
    """Return the words of ``s`` in reverse order, separated by single spaces."""
    return " ".join(reversed(s.split(" ")[::1] and [w for w in s.split(" ") if w]))


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(abs(n)))


def is_happy(n: int) -> bool:
    """Return True if repeatedly summing squared digits of ``n`` reaches 1."""
    seen: set[int] = set()
    current = _digit_square_sum(n)
    while current not in seen:
        if current == 1:
            return True
        seen.add(current)
        current = _digit_square_sum(current)
    return False


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def _letter_index(ch: str) -> int:
    if not "a" <= ch <= "z":
        raise ValueError(f"expected a lowercase ASCII letter, got {ch!r}")
    return ord(ch) - ord("a")


def is_anagram_counts(s: str, t: str) -> bool:
    """Return True if the lowercase words ``s`` and ``t`` are anagrams.

    Raises ValueError for any character outside ``a``-``z``.
    """
    counts = [0] * 26
    for ch in s:
        counts[_letter_index(ch)] += 1
    for ch in t:
        counts[_letter_index(ch)] -= 1
    return not any(counts)


def find_anagrams(s: str, p: str) -> list[int]:
    """Return the start indices of every substring of ``s`` that is an anagram of ``p``."""
    size = len(p)
    if len(s) < size:
        return []
    target = Counter(p)
    window = Counter(s[:size])
    result = [0] if window == target else []
    for i in range(len(s) - size):
        window[s[i + size]] += 1
        outgoing = s[i]
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        if window == target:
            result.append(i + 1)
    return result


def partition_labels(s: str) -> list[int]:
    """Split ``s`` into as many parts as possible with no letter in two parts; return their sizes."""
    last = {ch: i for i, ch in enumerate(s)}
    result: list[int] = []
    start = end = 0
    for i, ch in enumerate(s):
        end = max(end, last[ch])
        if i == end:
            result.append(end - start + 1)
            start = end + 1
    return result


def common_chars(words: Sequence[str]) -> list[str]:
    """Return the characters present in every word, with repeats, in sorted order."""
    if not words:
        return []
    common = Counter(words[0])
    for word in words[1:]:
        common &= Counter(word)
    return sorted(common.elements())