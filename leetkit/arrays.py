"""Problems on integer sequences: sums, windows, jumps, intervals and searches."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from itertools import accumulate


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the indices of two numbers adding up to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        partner = seen.get(target - num)
        if partner is not None:
            return partner, index
        seen[num] = index
    return None


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ascending triple of values that sums to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if first > 0:
            break
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                result.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
    return result


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move the values other than ``val`` to the front, in order; return their count."""
    kept = [num for num in nums if num != val]
    nums[: len(kept)] = kept
    return len(kept)


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    if not height:
        return 0
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        max(min(left, right) - h, 0)
        for left, right, h in zip(left_max, right_max, height)
    )


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps needed to reach the last position."""
    if len(nums) < 2:
        return 0
    current_cover = next_cover = count = 0
    last = len(nums) - 1
    for i, step in enumerate(nums):
        next_cover = max(next_cover, i + step)
        if i == current_cover:
            count += 1
            current_cover = next_cover
            if current_cover >= last:
                break
    return count


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    if not nums:
        raise ValueError("max_subarray() needs at least one number")
    best = current = nums[0]
    for num in nums[1:]:
        current = max(num, current + num)
        best = max(best, current)
    return best


def max_subarray_running(nums: Sequence[int]) -> int:
    """Return the largest contiguous-run sum, resetting the running sum when it drops to zero."""
    if not nums:
        raise ValueError("max_subarray_running() needs at least one number")
    best: int | None = None
    running = 0
    for num in nums:
        running += num
        best = running if best is None else max(best, running)
        if running <= 0:
            running = 0
    return best


def can_jump(nums: Sequence[int]) -> bool:
    """Return True if the last position can be reached from the first."""
    if len(nums) < 2:
        return True
    last = len(nums) - 1
    cover = 0
    i = 0
    while i <= cover:
        cover = max(cover, i + nums[i])
        if cover >= last:
            return True
        i += 1
    return False


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals and return them sorted."""
    merged: list[list[int]] = []
    for start, end in sorted(list(pair) for pair in intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def range_sums(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> Iterator[int]:
    """Yield the sum of ``values[a..b]`` (inclusive) for each query ``(a, b)``."""
    for a, b in queries:
        if a < 0 or b >= len(values):
            raise IndexError(f"range [{a}, {b}] out of bounds for {len(values)} values")
        yield sum(values[a : b + 1])


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n``, ``n`` values and index pairs from stdin; print each range sum."""
    parser = argparse.ArgumentParser(
        description="Print inclusive range sums read from standard input."
    )
    parser.parse_args(argv)
    tokens = [int(token) for token in sys.stdin.read().split()]
    if not tokens:
        return 0
    count, rest = tokens[0], tokens[1:]
    if len(rest) < count:
        parser.error(f"expected {count} values, got {len(rest)}")
    values, bounds = rest[:count], iter(rest[count:])
    for total in range_sums(values, zip(bounds, bounds)):
        print(total)
    return 0


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    present = set(nums)
    best = 0
    for num in present:
        if num - 1 in present:
            continue
        end = num
        while end + 1 in present:
            end += 1
        best = max(best, end - num + 1)
    return best


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies so that higher-rated neighbours get more."""
    candies = [1] * len(ratings)
    for i in range(1, len(ratings)):
        if ratings[i] > ratings[i - 1]:
            candies[i] = candies[i - 1] + 1
    for i in reversed(range(len(ratings) - 1)):
        if ratings[i] > ratings[i + 1]:
            candies[i] = max(candies[i], candies[i + 1] + 1)
    return sum(candies)


def min_subarray_len(s: int, nums: Sequence[int]) -> int:
    """Return the shortest window whose sum is at least ``s``, or 0 if none."""
    best: int | None = None
    window = 0
    slow = 0
    for fast, num in enumerate(nums):
        window += num
        while window >= s:
            length = fast - slow + 1
            best = length if best is None else min(best, length)
            window -= nums[slow]
            slow += 1
    return best or 0


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move zeros to the end in place, keeping the order of the other values."""
    left = 0
    for right, num in enumerate(nums):
        if num != 0:
            nums[left], nums[right] = nums[right], nums[left]
            left += 1


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse the characters in place."""
    chars.reverse()


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values present in both inputs, in ascending order."""
    return sorted(set(nums1) & set(nums2))


def search(nums: Sequence[int], target: int) -> int:
    """Binary-search a sorted sequence; return the index of ``target`` or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        middle = (left + right) // 2
        if nums[middle] < target:
            left = middle + 1
        elif nums[middle] > target:
            right = middle - 1
        else:
            return middle
    return -1


def sorted_squares(nums: Iterable[int]) -> list[int]:
    """Return the squares of the values in ascending order."""
    return sorted(num * num for num in nums)


def sorted_squares_bubble(nums: Iterable[int]) -> list[int]:
    """Return the squares of the values, ordered by a bubble sort."""
    squares = [num * num for num in nums]
    for end in range(len(squares) - 1, 0, -1):
        for j in range(end):
            if squares[j] > squares[j + 1]:
                squares[j], squares[j + 1] = squares[j + 1], squares[j]
    return squares


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of ones after flipping at most ``k`` zeros."""
    best = left = zeros = 0
    for right, num in enumerate(nums):
        zeros += 1 - num
        while zeros > k:
            zeros -= 1 - nums[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def largest_sum_after_k_negations(nums: Iterable[int], k: int) -> int:
    """Return the largest sum reachable by negating exactly ``k`` times."""
    values = sorted(nums)
    for i, num in enumerate(values):
        if num < 0 and k > 0:
            values[i] = -num
            k -= 1
    if k % 2 == 1:
        values.sort()
        values[0] = -values[0]
    return sum(values)


def minimum_index(nums: Sequence[int]) -> int:
    """Return the smallest split index where both halves share the dominant value, or -1."""
    remaining = Counter(nums)
    seen: Counter[int] = Counter()
    total = len(nums)
    for i, num in enumerate(nums):
        seen[num] += 1
        remaining[num] -= 1
        if seen[num] * 2 > i + 1 and remaining[num] * 2 > total - 1 - i:
            return i
    return -1


def max_score_sightseeing_pair(values: Sequence[int]) -> int:
    """Return the best ``values[i] + values[j] + i - j`` over ``i < j``, never below 0."""
    best = 0
    best_left: int | None = None
    for j, value in enumerate(values):
        if best_left is not None:
            best = max(best, best_left + value - j)
        candidate = value + j
        best_left = candidate if best_left is None else max(best_left, candidate)
    return best