"""Prime sieve and multiplication tables."""

from __future__ import annotations

from typing import List


def primes_up_to(n: int) -> List[int]:
    """Return every prime not greater than ``n``, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    is_prime = [True] * (n + 1)
    is_prime[0] = is_prime[1] = False
    p = 2
    while p * p <= n:
        if is_prime[p]:
            is_prime[p * p :: p] = [False] * len(range(p * p, n + 1, p))
        p += 1
    return [number for number, prime in enumerate(is_prime) if prime]


def multiplication_table(num: int) -> List[str]:
    """Return the lines ``"num * a = product"`` for ``a`` from 1 to 10."""
    return [f"{num} * {a} = {num * a}" for a in range(1, 11)]