"""
Nine decimal digits of pi at an arbitrary offset.

This is Bellard's O(n^2) refinement of Plouffe's method applied to
Gosper's series

    pi = sum( (25*k - 3) / (binomial(3*k, k) * 2^(k-1)), k = 0..infinity )

For every prime a <= 3*nl the series is summed exactly modulo a power of a,
with the powers of a pulled out of each term tracked separately so that
the remaining numerator and denominator stay invertible. Each channel then
contributes a fraction s/av to a floating point accumulator of which only
the fractional part is kept.

Usage
    from pidigits.extractor import extract_digit_block
    print("%09d" % extract_digit_block(1))   # 141592653
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from .modmath import inv_mod, inv_mod2, mul_mod, pow_mod
from .primes import PrimeTable, next_prime


_TERMS_PER_DIGIT = math.log(10.0) / math.log(13.5)


def term_count(n: int) -> int:
    """
    Number of series terms needed for nine correct digits at offset n.

    Each term gains log10(13.5) decimal digits; 20 guard digits are added.
    """
    return int((n + 20) * _TERMS_PER_DIGIT)


def _strip(t: int, a: int, v: int, vinc: int, kq: int, kqinc: int) -> Tuple[int, int, int]:
    """
    Advance the progression counter kq by kqinc. When it lands on a multiple
    of a, divide every factor a out of t and move the tally v by vinc per
    factor removed. Returns the new (t, v, kq).
    """
    kq += kqinc
    if kq >= a:
        kq %= a
        if kq == 0:
            while True:
                t //= a
                v += vinc
                if t % a:
                    break
    return t, v, kq


def _channel(n: int, nl: int, a: int, vmax: int) -> Tuple[int, int]:
    """Series sum for prime base a, as (s, av) with 0 <= s < av."""
    av = 1
    for _ in range(vmax):
        av *= a

    s = 0
    den = 1
    kq1, kq2, kq3, kq4 = 0, -1, -3, -2
    if a == 2:
        num = 1
        v = -n
    else:
        num = pow_mod(2, n, av)
        v = 0

    for k in range(1, nl + 1):
        t, v, kq1 = _strip(2 * k, a, v, -1, kq1, 2)
        num = mul_mod(num, t, av)

        t, v, kq2 = _strip(2 * k - 1, a, v, -1, kq2, 2)
        num = mul_mod(num, t, av)

        t, v, kq3 = _strip(3 * (3 * k - 1), a, v, 1, kq3, 9)
        den = mul_mod(den, t, av)

        t, v, kq4 = _strip(3 * k - 2, a, v, 1, kq4, 3)
        if a != 2:
            t *= 2
        else:
            v += 1
        den = mul_mod(den, t, av)

        if v > 0:
            if a != 2:
                t = inv_mod2(den, av)
            else:
                t = inv_mod(den, av)
            t = mul_mod(t, num, av)
            for _ in range(v, vmax):
                t = mul_mod(t, a, av)
            t = mul_mod(t, 25 * k - 3, av)
            s += t
            if s >= av:
                s -= av

    s = mul_mod(s, pow_mod(5, n - 1, av), av)
    return s, av


def _frac(x: float) -> float:
    return x - math.floor(x)


def extract_digit_block(n: int, primes: Optional[PrimeTable] = None) -> int:
    """
    Nine digits of pi starting at digit n after the decimal point (n >= 1).

    The result is an int in [0, 10**9); format it with "%09d" to keep the
    leading zeros. `primes`, when given and large enough, replaces the
    prime enumeration with a precomputed table; the result is the same.
    """
    nl = term_count(n)
    bound = 3 * nl
    l3n = math.log(bound)

    bases: Iterable[int]
    if primes is not None and primes.covers(bound):
        bases = primes.upto(bound)
    else:
        bases = _enumerate_primes(bound)

    total = 0.0
    for a in bases:
        vmax = int(l3n / math.log(a))
        if a == 2:
            vmax += nl - n
            if vmax <= 0:
                continue
        s, av = _channel(n, nl, a, vmax)
        total = _frac(total + s / av)

    return int(total * 1e9)


def _enumerate_primes(bound: int):
    a = 2
    while a <= bound:
        yield a
        a = next_prime(a)
