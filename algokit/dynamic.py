"""Dynamic-programming problems: paths, stairs, robbery, coins and partitions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import isqrt


def unique_paths(m: int, n: int) -> int:
    """Count the right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(1, m):
        for col in range(1, n):
            row[col] += row[col - 1]
    return row[-1]


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n < 1:
        raise ValueError("n must be positive")
    one_back, two_back = 2, 1
    if n == 1:
        return two_back
    for _ in range(2, n):
        one_back, two_back = one_back + two_back, one_back
    return one_back


def rob(nums: Sequence[int]) -> int:
    """Return the largest total of ``nums`` taken with no two neighbours."""
    if len(nums) < 2:
        return nums[0] if nums else 0
    amount = [0, nums[0], nums[1]]
    best = max(nums[0], nums[1])
    for i in range(3, len(nums) + 1):
        value = max(
            amount[i - 1],
            amount[i - 2] + nums[i - 1],
            amount[i - 3] + nums[i - 1],
        )
        amount.append(value)
        best = max(best, value)
    return best


def num_squares(n: int) -> int:
    """Return the fewest perfect squares that sum to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    squares = [root * root for root in range(1, isqrt(n) + 1)]
    fewest = [0] * (n + 1)
    for total in range(1, n + 1):
        fewest[total] = 1 + min(
            fewest[total - square] for square in squares if square <= total
        )
    return fewest[n]


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins making ``amount``, or -1 if it cannot be made."""
    denominations = sorted(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")
    fewest = [0] * (amount + 1)
    for total in range(1, amount + 1):
        options = []
        for coin in denominations:
            if coin > total:
                break
            if fewest[total - coin] >= 0:
                options.append(fewest[total - coin] + 1)
        fewest[total] = min(options, default=-1)
    return fewest[amount]


def can_partition(nums: Iterable[int]) -> bool:
    """Return whether ``nums`` splits into two groups with equal sums."""
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    total = sum(values)
    if total % 2:
        return False
    target = total // 2
    limit = (1 << (target + 1)) - 1
    reachable = 1
    for value in values:
        reachable = (reachable | (reachable << value)) & limit
    return bool(reachable >> target & 1)


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way past the top, starting on step 0 or 1."""
    two_back = one_back = 0
    for step in range(2, len(cost) + 1):
        two_back, one_back = one_back, min(
            two_back + cost[step - 2], one_back + cost[step - 1]
        )
    return one_back


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 0, 1
    if n == 0:
        return previous
    for _ in range(1, n):
        previous, current = current, previous + current
    return current


def divisor_game(n: int) -> bool:
    """Return whether the first player wins the divisor game starting at ``n``."""
    return n % 2 == 0