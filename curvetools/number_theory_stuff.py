__all__ = ['rem_euclid', 'legendre', 'modsqrt']


def rem_euclid(a, b):
    """Remainder of the signed integer a divided by b > 0, always in [0, b)"""
    if b <= 0:
        raise ValueError(f"Modulus must be positive, got {b}")
    if a >= 0:
        return a % b
    r = -a % b
    return b - r if r else 0


def legendre(a, p):
    """https://en.wikipedia.org/wiki/Legendre_symbol"""
    if p == 2:
        return a % 2
    mod = pow(a, (p-1)//2, p)
    return -1 if mod == p-1 else mod


def modsqrt(a, p):
    """
        https://eli.thegreenplace.net/2009/03/07/computing-modular-square-roots-in-python

        Find a quadratic residue (mod p) of 'a'. p
        must be a prime.

        Solve the congruence of the form:
            x^2 = a (mod p)
        And returns x. Note that p - x is also a root.

        0 is returned is no square root exists for
        these a and p.

        The Tonelli-Shanks algorithm is used (except
        for some simple cases in which the solution
        is known from an identity).
    """
    a = rem_euclid(a, p)
    if p == 2:
        return a
    if a == 0 or legendre(a, p) != 1:
        return 0
    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)

    # Partition p-1 to s * 2^e for an odd s
    s = p - 1
    e = 0
    while s % 2 == 0:
        s //= 2
        e += 1

    # Find some 'n' with a legendre symbol n|p = -1.
    n = 2
    while legendre(n, p) != -1:
        n += 1

    # x is a guess of the square root that gets better
    # with each iteration.
    # b is the "fudge factor" - by how much we're off
    # with the guess. The invariant x^2 = ab (mod p)
    # is maintained throughout the loop.
    # g is used for successive powers of n to update
    # both a and b
    # r is the exponent - decreases with each update
    x = pow(a, (s + 1) // 2, p)
    b = pow(a, s, p)
    g = pow(n, s, p)
    r = e

    while True:
        t = b
        m = 0
        for m in range(r):
            if t == 1:
                break
            t = pow(t, 2, p)

        if m == 0:
            return x

        gs = pow(g, 2 ** (r - m - 1), p)
        g = (gs * gs) % p
        x = (x * gs) % p
        b = (b * g) % p
        r = m
