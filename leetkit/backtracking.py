"""Backtracking problems: combinations, permutations, subsets and partitions."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import combinations
from typing import TypeVar

T = TypeVar("T")

_KEYPAD = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string the phone-keypad ``digits`` can spell.

    Raises ValueError for a character that is not a decimal digit.
    """
    if not digits:
        return []
    try:
        groups = [_KEYPAD[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"not a keypad digit: {exc.args[0]!r}") from None

    def spell(depth: int, prefix: str) -> Iterator[str]:
        if depth == len(groups):
            yield prefix
            return
        for letter in groups[depth]:
            yield from spell(depth + 1, prefix + letter)

    return list(spell(0, ""))


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses, '(' sorting first."""
    if n < 0:
        raise ValueError("n must be non-negative")

    def build(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if len(prefix) == 2 * n:
            yield prefix
            return
        if opened < n:
            yield from build(prefix + "(", opened + 1, closed)
        if closed < opened:
            yield from build(prefix + ")", opened, closed + 1)

    return list(build("", 0, 0))


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every combination of ``candidates`` (reuse allowed) summing to ``target``.

    Each combination lists candidates in the order they appear in the input.
    Raises ValueError if a candidate is not positive.
    """
    if any(candidate <= 0 for candidate in candidates):
        raise ValueError("candidates must be positive")

    def search(start: int, remaining: int, path: list[int]) -> Iterator[list[int]]:
        if remaining < 0:
            return
        if remaining == 0:
            yield list(path)
            return
        for i in range(start, len(candidates)):
            path.append(candidates[i])
            yield from search(i, remaining - candidates[i], path)
            path.pop()

    return list(search(0, target, []))


def permute(nums: Sequence[T]) -> list[list[T]]:
    """Return every ordering of ``nums``, choosing unused positions left to right."""
    used = [False] * len(nums)

    def search(path: list[T]) -> Iterator[list[T]]:
        if len(path) == len(nums):
            yield list(path)
            return
        for i, num in enumerate(nums):
            if used[i]:
                continue
            used[i] = True
            path.append(num)
            yield from search(path)
            path.pop()
            used[i] = False

    return list(search([]))


def permute_by_swap(nums: Sequence[T]) -> list[list[T]]:
    """Return every ordering of ``nums``, produced by swapping elements into place."""
    work = list(nums)

    def search(index: int) -> Iterator[list[T]]:
        if index == len(work):
            yield list(work)
            return
        for i in range(index, len(work)):
            work[i], work[index] = work[index], work[i]
            yield from search(index + 1)
            work[i], work[index] = work[index], work[i]

    return list(search(0))


def combine(n: int, k: int) -> list[list[int]]:
    """Return every ascending choice of ``k`` numbers from 1 to ``n``."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, n + 1), k)]


def subsets(nums: Sequence[T]) -> list[list[T]]:
    """Return every subset of ``nums``, in depth-first order starting with the empty one."""

    def search(start: int, path: list[T]) -> Iterator[list[T]]:
        yield list(path)
        for i in range(start, len(nums)):
            path.append(nums[i])
            yield from search(i + 1, path)
            path.pop()

    return list(search(0, []))


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def partition_palindromes(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into pieces that are all palindromes."""

    def search(start: int, path: list[str]) -> Iterator[list[str]]:
        if start == len(s):
            yield list(path)
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if not _is_palindrome(piece):
                continue
            path.append(piece)
            yield from search(end, path)
            path.pop()

    return list(search(0, []))


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Return every ascending set of ``k`` distinct digits 1-9 that sums to ``n``."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, 10), k) if sum(combo) == n]


def can_partition_k_subsets(nums: Sequence[int], k: int) -> bool:
    """Return True if ``nums`` splits into ``k`` groups with equal sums.

    Raises ValueError if ``k`` is not positive.
    """
    if k <= 0:
        raise ValueError("k must be positive")
    total = sum(nums)
    if total % k != 0:
        return False
    target = total // k
    values = sorted(nums, reverse=True)
    used = [False] * len(values)

    def fill(groups_left: int, start: int, current: int) -> bool:
        if groups_left == 0:
            return True
        if current == target:
            return fill(groups_left - 1, 0, 0)
        for i in range(start, len(values)):
            if not used[i] and current + values[i] <= target:
                used[i] = True
                if fill(groups_left, i + 1, current + values[i]):
                    return True
                used[i] = False
        return False

    return fill(k, 0, 0)