# ============================================================
# Smallest enclosing circle of a set of circles
# - Welzl style move-to-front over a basis of at most 3 circles
# - deterministic: circles are visited in the given order
# ============================================================

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

Circle = Tuple[float, float, float]

_EPS = 1e-6


def _encloses_not(a: Circle, b: Circle) -> bool:
    dr = a[2] - b[2]
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return dr < 0 or dr * dr < dx * dx + dy * dy


def _encloses_weak(a: Optional[Circle], b: Circle) -> bool:
    if a is None:
        return False
    dr = a[2] - b[2] + _EPS
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return dr > 0 and dr * dr > dx * dx + dy * dy


def _encloses_weak_all(a: Optional[Circle], basis: Sequence[Circle]) -> bool:
    return a is not None and all(_encloses_weak(a, b) for b in basis)


def _enclose_basis_2(a: Circle, b: Circle) -> Circle:
    x1, y1, r1 = a
    x2, y2, r2 = b
    x21, y21, r21 = x2 - x1, y2 - y1, r2 - r1
    dist = math.sqrt(x21 * x21 + y21 * y21)
    if dist == 0:
        return a if r1 >= r2 else b
    return (
        (x1 + x2 + x21 / dist * r21) / 2,
        (y1 + y2 + y21 / dist * r21) / 2,
        (dist + r1 + r2) / 2,
    )


def _enclose_basis_3(a: Circle, b: Circle, c: Circle) -> Optional[Circle]:
    """Circle tangent to (and containing) three circles, None if degenerate."""
    x1, y1, r1 = a
    x2, y2, r2 = b
    x3, y3, r3 = c
    a2, a3 = x1 - x2, x1 - x3
    b2, b3 = y1 - y2, y1 - y3
    c2, c3 = r2 - r1, r3 - r1
    d1 = x1 * x1 + y1 * y1 - r1 * r1
    d2 = d1 - x2 * x2 - y2 * y2 + r2 * r2
    d3 = d1 - x3 * x3 - y3 * y3 + r3 * r3
    ab = a3 * b2 - a2 * b3
    if ab == 0:
        # collinear centers
        return None
    xa = (b2 * d3 - b3 * d2) / (ab * 2) - x1
    xb = (b3 * c2 - b2 * c3) / ab
    ya = (a3 * d2 - a2 * d3) / (ab * 2) - y1
    yb = (a2 * c3 - a3 * c2) / ab
    qa = xb * xb + yb * yb - 1
    qb = 2 * (r1 + xa * xb + ya * yb)
    qc = xa * xa + ya * ya - r1 * r1
    if qa:
        disc = qb * qb - 4 * qa * qc
        if disc < 0:
            return None
        r = -(qb + math.sqrt(disc)) / (2 * qa)
    elif qb:
        r = -qc / qb
    else:
        return None
    return x1 + xa + xb * r, y1 + ya + yb * r, r


def _enclose_basis(basis: Sequence[Circle]) -> Optional[Circle]:
    if len(basis) == 1:
        return basis[0]
    if len(basis) == 2:
        return _enclose_basis_2(basis[0], basis[1])
    return _enclose_basis_3(basis[0], basis[1], basis[2])


def _extend_basis(basis: List[Circle], p: Circle) -> List[Circle]:
    if _encloses_weak_all(p, basis):
        return [p]

    for b in basis:
        if _encloses_not(p, b) and _encloses_weak_all(_enclose_basis_2(b, p), basis):
            return [b, p]

    for i in range(len(basis) - 1):
        for j in range(i + 1, len(basis)):
            bi, bj = basis[i], basis[j]
            if (
                _encloses_not(_enclose_basis_2(bi, bj), p)
                and _encloses_not(_enclose_basis_2(bi, p), bj)
                and _encloses_not(_enclose_basis_2(bj, p), bi)
                and _encloses_weak_all(_enclose_basis_3(bi, bj, p), basis)
            ):
                return [bi, bj, p]

    # Only reachable through floating point noise, keep the widest pair.
    candidates = [_enclose_basis_2(b, p) for b in basis]
    return [basis[int(np.argmax([c[2] for c in candidates]))], p]


def enclose(circles: Sequence[Circle]) -> Optional[Circle]:
    """Smallest circle containing all given ``(x, y, r)`` circles.

    Returns None for an empty input.
    """
    circles = [(float(x), float(y), float(r)) for x, y, r in circles]
    basis: List[Circle] = []
    e: Optional[Circle] = None
    i = 0
    while i < len(circles):
        p = circles[i]
        if _encloses_weak(e, p):
            i += 1
        else:
            basis = _extend_basis(basis, p)
            e = _enclose_basis(basis)
            i = 0
    return e
