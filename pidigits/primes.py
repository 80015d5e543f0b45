from typing import Iterator, Tuple


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def next_prime(n: int) -> int:
    """Smallest prime strictly greater than n."""
    while True:
        n += 1
        if is_prime(n):
            return n


class PrimeTable:
    """
    The primes 2..bound, in increasing order.

    Built once and handed to every extractor call that needs primes up to
    at most `bound`; it is never modified after construction so workers can
    share it freely.
    """

    __slots__ = ("_bound", "_primes")

    def __init__(self, bound: int):
        primes = []
        p = 2
        while p <= bound:
            primes.append(p)
            p = next_prime(p)
        self._bound = bound
        self._primes: Tuple[int, ...] = tuple(primes)

    @property
    def bound(self) -> int:
        return self._bound

    def covers(self, bound: int) -> bool:
        return bound <= self._bound

    def upto(self, bound: int) -> Iterator[int]:
        for p in self._primes:
            if p > bound:
                break
            yield p

    def __iter__(self) -> Iterator[int]:
        return iter(self._primes)

    def __len__(self) -> int:
        return len(self._primes)

    def __repr__(self) -> str:
        return f"PrimeTable(bound={self._bound}, count={len(self._primes)})"
