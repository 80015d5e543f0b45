"""
Modular arithmetic on channel moduli.

Every modulus handed to these functions is a prime power that fits in a
32-bit signed int, so values stay small even though Python would not
overflow anyway.
"""


def mul_mod(a: int, b: int, n: int) -> int:
    return (a * b) % n


def inv_mod(x: int, y: int) -> int:
    """
    Inverse of x mod y by the extended Euclidean algorithm.

    x and y must be coprime; the result is normalised to [0, y).
    """
    u, v = x, y
    a, c = 0, 1
    while True:
        q = v // u
        c, a = a - q * c, c
        u, v = v - q * u, u
        if u == 0:
            break
    return a % y


def _halve(t1: int, t3: int, v: int):
    if t1 & 1:
        t1 += v
    return t1 >> 1, t3 >> 1


def inv_mod2(u: int, v: int) -> int:
    """
    Inverse of u mod v for odd v, binary (right shift) variant of
    extended Euclid. Cheaper than inv_mod for the odd prime channels.
    """
    u1, u3 = 1, u
    v1, v3 = v, v
    if u & 1:
        # t3 is already odd, go straight to the sign test
        t1, t3 = 0, -v
        skip = True
    else:
        t1, t3 = 1, u
        skip = False

    while True:
        if not skip:
            t1, t3 = _halve(t1, t3, v)
        skip = False
        while not t3 & 1:
            t1, t3 = _halve(t1, t3, v)

        if t3 >= 0:
            u1, u3 = t1, t3
        else:
            v1, v3 = v - t1, -t3
        t1 = u1 - v1
        t3 = u3 - v3
        if t1 < 0:
            t1 += v
        if t3 == 0:
            return u1


def pow_mod(a: int, b: int, m: int) -> int:
    # a^b mod m, square and multiply
    r = 1
    while True:
        if b & 1:
            r = mul_mod(r, a, m)
        b >>= 1
        if b == 0:
            return r
        a = mul_mod(a, a, m)
