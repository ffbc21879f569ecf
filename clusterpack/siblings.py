# ============================================================
# Front-chain packing of sibling circles
# - first circle at the origin, second tangent on the x axis
# - every further circle tangent to a pair of the front chain,
#   the pair being the one closest to the centroid
# - the result is centred on the smallest enclosing circle
# ============================================================

import math
from typing import List, Sequence, Tuple

import numpy as np

from clusterpack.enclose import enclose

_EPS = 1e-6


def _place(b: int, a: int, c: int, x: List[float], y: List[float], r: List[float]):
    """Move circle c so that it is tangent to both a and b."""
    dx = x[b] - x[a]
    dy = y[b] - y[a]
    d2 = dx * dx + dy * dy
    if d2:
        a2 = (r[a] + r[c]) ** 2
        b2 = (r[b] + r[c]) ** 2
        if a2 > b2:
            t = (d2 + b2 - a2) / (2 * d2)
            s = math.sqrt(max(0.0, b2 / d2 - t * t))
            x[c] = x[b] - t * dx - s * dy
            y[c] = y[b] - t * dy + s * dx
        else:
            t = (d2 + a2 - b2) / (2 * d2)
            s = math.sqrt(max(0.0, a2 / d2 - t * t))
            x[c] = x[a] + t * dx - s * dy
            y[c] = y[a] + t * dy + s * dx
    else:
        x[c] = x[a] + r[c]
        y[c] = y[a]


def _intersects(a: int, b: int, x: List[float], y: List[float], r: List[float]) -> bool:
    dr = r[a] + r[b] - _EPS
    dx = x[b] - x[a]
    dy = y[b] - y[a]
    return dr > 0 and dr * dr > dx * dx + dy * dy


def _score(a: int, b: int, x: List[float], y: List[float], r: List[float]) -> float:
    """Squared distance of the weighted tangent point of a and b to the origin."""
    ab = r[a] + r[b]
    if ab == 0:
        return x[a] * x[a] + y[a] * y[a]
    dx = (x[a] * r[b] + x[b] * r[a]) / ab
    dy = (y[a] * r[b] + y[b] * r[a]) / ab
    return dx * dx + dy * dy


def pack_siblings(radii: Sequence[float]) -> Tuple[np.ndarray, float]:
    """Pack circles of the given radii without overlaps around the origin.

    Parameters
    ----------
    radii: sequence of float
        Non negative radii, packed in the given order.

    Returns
    -------
    centers: np.ndarray
        Array of shape (n, 2) with the circle centers. The smallest circle
        enclosing them all is centred at the origin.
    radius: float
        Radius of that enclosing circle.
    """
    r = [float(v) for v in radii]
    n = len(r)
    x = [0.0] * n
    y = [0.0] * n
    if n == 0:
        return np.zeros((0, 2)), 0.0
    if n == 1:
        return np.zeros((1, 2)), r[0]
    if n == 2:
        x[0], x[1] = -r[1], r[0]
        return np.array([x, y]).T, r[0] + r[1]

    x[0], x[1] = -r[1], r[0]
    _place(1, 0, 2, x, y, r)

    # The front chain is a circular doubly linked list over circle indices.
    nxt = [0] * n
    prv = [0] * n
    nxt[0], prv[2] = 1, 1
    nxt[1], prv[0] = 2, 2
    nxt[2], prv[1] = 0, 0
    a, b = 0, 1

    i = 3
    while i < n:
        c = i
        _place(a, b, c, x, y, r)

        # Look for the closest intersecting circle along the chain, walking
        # ahead of b and behind a in turns, weighted by the radii passed.
        j, k = nxt[b], prv[a]
        sj, sk = r[b], r[a]
        collided = False
        while True:
            if sj <= sk:
                if _intersects(j, c, x, y, r):
                    b = j
                    nxt[a], prv[b] = b, a
                    collided = True
                    break
                sj += r[j]
                j = nxt[j]
            else:
                if _intersects(k, c, x, y, r):
                    a = k
                    nxt[a], prv[b] = b, a
                    collided = True
                    break
                sk += r[k]
                k = prv[k]
            if j == nxt[k]:
                break
        if collided:
            continue

        # Insert c between a and b.
        prv[c], nxt[c] = a, b
        nxt[a] = c
        prv[b] = c
        b = c

        # The pair closest to the centroid becomes the new (a, b).
        best = _score(a, nxt[a], x, y, r)
        node = nxt[c]
        while node != b:
            score = _score(node, nxt[node], x, y, r)
            if score < best:
                a, best = node, score
            node = nxt[node]
        b = nxt[a]
        i += 1

    chain = [b]
    node = nxt[b]
    while node != b:
        chain.append(node)
        node = nxt[node]
    ex, ey, er = enclose([(x[idx], y[idx], r[idx]) for idx in chain])

    centers = np.array([x, y]).T - np.array([ex, ey])
    return centers, er
