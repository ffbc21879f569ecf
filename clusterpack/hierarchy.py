from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from clusterpack.errors import InvalidInputError

ROOT_KEY = "root"


@dataclass(frozen=True)
class HierarchyNode:
    """A group (with children) or a leaf (with a value) of the input hierarchy.

    Parameters
    ----------
    key: Any
        Identifier of the node, unique among its siblings.
    children: sequence of HierarchyNode
        Ordered child nodes, empty for leaves.
    value: Optional[float]
        The leaf value. Groups derive their size from their descendants.
    data: Any
        Optional source record the node was built from.
    """

    key: Any
    children: Tuple["HierarchyNode", ...] = ()
    value: Optional[float] = None
    data: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @classmethod
    def from_nest(cls, entry: Dict[str, Any]) -> "HierarchyNode":
        """Build a node from a nest-shaped dict.

        Groups look like ``{"key": k, "values": [...]}`` and rolled-up leaves
        like ``{"key": k, "value": v}``.
        """
        if "key" not in entry:
            raise InvalidInputError(f"Nest entry without a key: {entry!r}")
        values = entry.get("values")
        if isinstance(values, (list, tuple)):
            return cls(
                key=entry["key"],
                children=tuple(cls.from_nest(child) for child in values),
                data=entry,
            )
        return cls(key=entry["key"], value=entry.get("value", values), data=entry)


def nodes_from_nest(entries: Sequence[Dict[str, Any]]) -> List[HierarchyNode]:
    return [HierarchyNode.from_nest(entry) for entry in entries]


def count_nodes(nodes: Sequence[HierarchyNode]) -> int:
    return sum(1 + count_nodes(node.children) for node in nodes)


# ----- size functions ----- #

SizeFunction = Callable[[HierarchyNode], float]


def constant_size(node: HierarchyNode) -> float:
    """Every leaf gets the same size, i.e. circles of equal area."""
    return 1.0


def node_value(node: HierarchyNode) -> float:
    """Size a leaf by its own value; a missing value counts as 0."""
    return 0.0 if node.value is None else float(node.value)


# ----- cluster input ----- #


@dataclass(frozen=True)
class SingleCluster:
    """The top level nodes of one circle packing."""

    nodes: Sequence[HierarchyNode]

    def clusters(self) -> List[List[HierarchyNode]]:
        return [list(self.nodes)]


@dataclass(frozen=True)
class MultiCluster:
    """Several independent circle packings, one per grid cell."""

    cluster_nodes: Sequence[Sequence[HierarchyNode]]

    def clusters(self) -> List[List[HierarchyNode]]:
        return [list(nodes) for nodes in self.cluster_nodes]


ClusterInput = Union[SingleCluster, MultiCluster, Sequence[Sequence[HierarchyNode]]]


def _cluster_nodes(i: int, nodes: Any) -> List[HierarchyNode]:
    """Nodes of one cluster, given as nodes, nest dicts or a root dict with ``values``."""
    if isinstance(nodes, dict):
        if not isinstance(nodes.get("values"), (list, tuple)):
            raise InvalidInputError(f"Cluster {i} is a dict without a 'values' list.")
        nodes = nodes["values"]
    if isinstance(nodes, HierarchyNode) or isinstance(nodes, (str, bytes)) or not isinstance(nodes, Sequence):
        raise InvalidInputError(
            f"Cluster {i} should be a sequence of HierarchyNode, got {type(nodes).__name__}. "
            "Use SingleCluster to lay out a single cluster."
        )
    converted = []
    for node in nodes:
        if isinstance(node, dict):
            node = HierarchyNode.from_nest(node)
        elif not isinstance(node, HierarchyNode):
            raise InvalidInputError(
                f"Cluster {i} contains a {type(node).__name__}, expected HierarchyNode or a nest dict."
            )
        converted.append(node)
    return converted


def as_clusters(data: ClusterInput) -> List[List[HierarchyNode]]:
    """Normalize cluster input to a list of clusters.

    A plain sequence is always read as a sequence of clusters; wrap a single
    cluster in ``SingleCluster`` instead of passing its nodes directly. Each
    cluster may also be given in nest shape, either as a list of
    ``{"key": ..., "values"/"value": ...}`` dicts or as one root dict whose
    ``values`` are the top level entries.
    """
    if isinstance(data, SingleCluster):
        return [_cluster_nodes(0, data.nodes)]
    if isinstance(data, MultiCluster):
        data = data.cluster_nodes
    elif isinstance(data, (str, bytes, dict)) or not isinstance(data, Sequence):
        raise InvalidInputError(
            f"Expected SingleCluster, MultiCluster or a sequence of clusters, got {type(data).__name__}."
        )
    return [_cluster_nodes(i, nodes) for i, nodes in enumerate(data)]
