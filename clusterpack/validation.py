from collections import defaultdict
from typing import Any, List, Sequence, Tuple

import numpy as np
from scipy.spatial.distance import pdist, squareform

from clusterpack.descriptors import CircleDescriptor

Violation = Tuple[Any, Any]


def _overlapping_pairs(P: np.ndarray, r: np.ndarray, tol: float) -> Tuple[np.ndarray, np.ndarray]:
    need = r[:, None] + r[None, :] - squareform(pdist(P))
    iu, ju = np.triu_indices(len(r), k=1)
    mask = need[iu, ju] > tol
    return iu[mask], ju[mask]


def containment_violations(
    descriptors: Sequence[CircleDescriptor], tol: float = 1e-6
) -> List[Violation]:
    """(parent key, child key) pairs where the child sticks out of its parent.

    Children whose parent is not part of ``descriptors`` (e.g. the dropped
    synthetic root) are not checked.
    """
    index = {(d.cluster, d.path): d for d in descriptors}
    violations = []
    for d in descriptors:
        parent = index.get((d.cluster, d.path[:-1])) if d.path else None
        if parent is None:
            continue
        dist = np.hypot(d.x - parent.x, d.y - parent.y)
        if dist + d.r > parent.r + tol:
            violations.append((parent.key, d.key))
    return violations


def overlap_violations(
    descriptors: Sequence[CircleDescriptor], tol: float = 1e-6
) -> List[Violation]:
    """Key pairs of sibling circles that overlap by more than ``tol``."""
    groups = defaultdict(list)
    for d in descriptors:
        if d.path:
            groups[(d.cluster, d.path[:-1])].append(d)

    violations = []
    for siblings in groups.values():
        if len(siblings) < 2:
            continue
        P = np.array([[d.x, d.y] for d in siblings])
        r = np.array([d.r for d in siblings])
        for i, j in zip(*_overlapping_pairs(P, r, tol)):
            violations.append((siblings[i].key, siblings[j].key))
    return violations


def cluster_overlap_violations(
    descriptors: Sequence[CircleDescriptor], tol: float = 1e-6
) -> List[Tuple[int, int]]:
    """Pairs of clusters whose top level circles overlap each other."""
    top = [d for d in descriptors if d.depth == 1]
    if len(top) < 2:
        return []
    P = np.array([[d.x, d.y] for d in top])
    r = np.array([d.r for d in top])
    clusters = np.array([d.cluster for d in top])
    iu, ju = _overlapping_pairs(P, r, tol)
    return sorted(
        {(int(clusters[i]), int(clusters[j])) for i, j in zip(iu, ju) if clusters[i] != clusters[j]}
    )
