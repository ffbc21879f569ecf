from typing import List, Sequence

import numpy as np

from clusterpack import HierarchyNode


def leaf_nodes(values: Sequence[float], prefix: str = "leaf") -> List[HierarchyNode]:
    return [HierarchyNode(key=f"{prefix}_{i}", value=v) for i, v in enumerate(values)]


def generate_random_hierarchy(
    seed: int = 636, n_levels: int = 3, max_children: int = 5, max_value: float = 100.0
) -> List[HierarchyNode]:
    """A random hierarchy whose leaves all sit on level ``n_levels``.

    Args:
        seed: Seed of the random generator, the same seed gives the same tree.
        n_levels: Depth of the leaves below the (implicit) root, minimum value is 1.
        max_children: Every group gets between 1 and max_children children.
        max_value: Leaf values are drawn uniformly from (1, max_value).

    Returns:
        The top level nodes.
    """
    if n_levels < 1:
        raise ValueError(f"The number of levels should be at least 1, give {n_levels}.")
    rng = np.random.default_rng(seed)

    def build(level: int, prefix: str) -> List[HierarchyNode]:
        n_children = int(rng.integers(1, max_children + 1))
        if level == n_levels:
            return [
                HierarchyNode(key=f"{prefix}{i}", value=float(rng.uniform(1, max_value)))
                for i in range(n_children)
            ]
        return [
            HierarchyNode(key=f"{prefix}{i}", children=build(level + 1, f"{prefix}{i}."))
            for i in range(n_children)
        ]

    # At least two top level groups so that siblings get packed.
    nodes = build(1, "n")
    while len(nodes) < 2:
        nodes = build(1, "n")
    return nodes
