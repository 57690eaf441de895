"""Dynamic programming exercises."""

from __future__ import annotations

from typing import Sequence

_STEP_SIZES = (1, 2)


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking 1 or 2 steps at a time.

    Returns -1 if the top cannot be reached.
    """
    if n < 0:
        raise ValueError("the number of steps cannot be negative")
    ways = [1]
    for step in range(1, n + 1):
        sources = [
            step - size
            for size in _STEP_SIZES
            if step - size >= 0 and (step - size == 0 or ways[step - size] != 0)
        ]
        ways.append(sum(ways[index] for index in sources))
    return ways[n] or -1


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if impossible."""
    if amount < 0:
        raise ValueError("the amount cannot be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin denominations must be positive")
    if amount == 0:
        return 0
    # 0 marks an unreachable amount, except at index 0
    fewest = [0]
    for value in range(1, amount + 1):
        candidates = [
            fewest[value - coin]
            for coin in coins
            if value - coin >= 0 and (value - coin == 0 or fewest[value - coin] != 0)
        ]
        fewest.append(min(candidates, default=value) + 1 if candidates else 0)
    return fewest[amount] or -1


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest cost to reach past the last step."""
    if not cost:
        raise ValueError("cost must hold at least one step")
    steps = [*cost, 0]
    best = [steps[0], steps[1]]
    for value in steps[2:]:
        best.append(min(best[-1], best[-2]) + value)
    return best[-1]


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) == 0."""
    if n < 0:
        raise ValueError("n cannot be negative")
    numbers = [0, 1]
    for _ in range(2, n + 1):
        numbers.append(numbers[-1] + numbers[-2])
    return numbers[n]


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index can be reached from the first."""
    if len(nums) == 1:
        return True
    distance_needed = 1
    for value in reversed(nums[:-1]):
        if value and value >= distance_needed:
            distance_needed = 1
        else:
            distance_needed += 1
    return distance_needed == 1