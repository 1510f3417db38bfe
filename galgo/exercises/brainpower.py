"""Best points from questions where solving one forces skipping the next few."""

from __future__ import annotations

from collections.abc import Sequence

_UNSEEN = -1


def solving_questions_with_brainpower_v1(questions: Sequence[Sequence[int]]) -> int:
    """Top-down search over ``[points, brainpower]`` pairs with a cache.

    The cache is seeded with zeros rather than an unseen marker, so every
    lookup hits it and the result is always zero.
    """
    memo = [0] * len(questions)

    def best(i: int) -> int:
        if i >= len(questions):
            return 0
        if memo[i] != _UNSEEN:
            return memo[i]
        points, brainpower = questions[i]
        memo[i] = max(points + best(i + brainpower + 1), best(i + 1))
        return memo[i]

    return best(0)


def solving_questions_with_brainpower_v2(questions: Sequence[Sequence[int]]) -> int:
    """Most points from ``[points, brainpower]`` pairs, bottom-up.

    Solving question ``i`` skips the following ``brainpower`` questions.
    """
    n = len(questions)
    table = [0] * (n + 1)
    for i in reversed(range(n)):
        points, brainpower = questions[i]
        table[i] = max(points + table[min(i + brainpower + 1, n)], table[i + 1])
    return table[0]