"""Dynamic-programming problems: paths, stairs, stocks, robbery and word breaks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(1, m):
        for j in range(1, n):
            row[j] += row[j - 1]
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Return the number of right/down paths avoiding cells marked 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one cell")
    row = [0] * len(grid[0])
    row[0] = 1
    for cells in grid:
        for j, cell in enumerate(cells):
            if cell == 1:
                row[j] = 0
            elif j > 0:
                row[j] += row[j - 1]
    return row[-1]


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking 1 or 2 at a time."""
    if n <= 2:
        return n
    before, current = 1, 2
    for _ in range(3, n + 1):
        before, current = current, before + current
    return current


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one sale."""
    if not prices:
        raise ValueError("max_profit() needs at least one price")
    holding, cash = -prices[0], 0
    for price in prices[1:]:
        cash = max(cash, holding + price)
        holding = max(holding, -price)
    return cash


def max_profit_multi(prices: Sequence[int]) -> int:
    """Return the best profit when any number of buy-sell rounds is allowed."""
    if not prices:
        raise ValueError("max_profit_multi() needs at least one price")
    holding, cash = -prices[0], 0
    for price in prices[1:]:
        holding, cash = max(holding, cash - price), max(cash, holding + price)
    return cash


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Return True if ``s`` is a concatenation of words from ``word_dict``."""
    words = set(word_dict)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[split] and s[split:end] in words for split in range(end)
        )
    return reachable[-1]


def rob(nums: Sequence[int]) -> int:
    """Return the largest total from houses in a row, skipping adjacent ones."""
    if not nums:
        raise ValueError("rob() needs at least one house")
    if len(nums) == 1:
        return nums[0]
    before, current = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, current = current, max(value + before, current)
    return current


def rob_circle(nums: Sequence[int]) -> int:
    """Return the largest total from houses in a circle, skipping adjacent ones."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    return max(rob(nums[:-1]), rob(nums[1:]))


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number."""
    if n < 0:
        raise ValueError("fib() is defined for non-negative n only")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way past the top, starting at step 0 or 1."""
    if len(cost) < 2:
        raise ValueError("min_cost_climbing_stairs() needs at least two steps")
    before, current = cost[0], cost[1]
    for step in cost[2:]:
        before, current = current, step + min(before, current)
    return min(before, current)