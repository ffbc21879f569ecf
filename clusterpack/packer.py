# ============================================================
# Circle packing of a single cluster
# - sizes summed bottom-up, leaf radius = sqrt(size)
# - siblings packed with the front chain, parents enclose children
# - root scaled to the packing area and moved to the requested center
# ============================================================

import math
from collections import deque
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from clusterpack.descriptors import CircleDescriptor
from clusterpack.errors import ConfigurationError, InvalidInputError
from clusterpack.hierarchy import ROOT_KEY, HierarchyNode, SizeFunction
from clusterpack.siblings import pack_siblings


def check_area(width: Optional[float], height: Optional[float], component: str):
    if width is None:
        raise ConfigurationError(f"Missing width in {component}.")
    if height is None:
        raise ConfigurationError(f"Missing height in {component}.")
    for name, extent in (("width", width), ("height", height)):
        if not math.isfinite(extent) or extent <= 0:
            raise InvalidInputError(
                f"The {name} of {component} should be positive and finite, got {extent}."
            )


@dataclass(frozen=True)
class PackConfig:
    """Settings of a single circle packing.

    ``width``/``height`` and ``sum_func`` have to be set before packing; the
    center defaults to the origin.
    """

    width: Optional[float] = None
    height: Optional[float] = None
    center_x: float = 0.0
    center_y: float = 0.0
    sum_func: Optional[SizeFunction] = None

    def with_size(self, width: float, height: float) -> "PackConfig":
        return replace(self, width=width, height=height)

    def with_center(self, x: float, y: float) -> "PackConfig":
        return replace(self, center_x=x, center_y=y)

    def with_sum(self, sum_func: SizeFunction) -> "PackConfig":
        return replace(self, sum_func=sum_func)

    def validate(self):
        check_area(self.width, self.height, "Pack")
        if self.sum_func is None:
            raise ConfigurationError("Missing sum function in Pack.")


class _PackedNode:
    __slots__ = ("node", "key", "depth", "parent", "children", "value", "x", "y", "r", "path")

    def __init__(self, node: Optional[HierarchyNode], key: Any, depth: int, parent):
        self.node = node
        self.key = key
        self.depth = depth
        self.parent = parent
        self.children: List["_PackedNode"] = []
        self.value = 0.0
        self.x = 0.0
        self.y = 0.0
        self.r = 0.0
        self.path: Tuple[Any, ...] = () if parent is None else parent.path + (key,)


def _build_tree(nodes: Sequence[HierarchyNode]) -> _PackedNode:
    root = _PackedNode(None, ROOT_KEY, 0, None)
    seen = set()
    stack = [(root, list(nodes))]
    while stack:
        parent, children = stack.pop()
        keys = set()
        for child in children:
            if not isinstance(child, HierarchyNode):
                raise InvalidInputError(
                    f"Expected HierarchyNode under {parent.key!r}, got {type(child).__name__}."
                )
            if id(child) in seen:
                raise InvalidInputError(
                    f"Node {child.key!r} appears more than once in the hierarchy."
                )
            seen.add(id(child))
            if child.key in keys:
                raise InvalidInputError(
                    f"Duplicate key {child.key!r} among the children of {parent.key!r}."
                )
            keys.add(child.key)
            packed = _PackedNode(child, child.key, parent.depth + 1, parent)
            parent.children.append(packed)
            stack.append((packed, list(child.children)))
    return root


def _post_order(root: _PackedNode) -> List[_PackedNode]:
    order, stack = [], [root]
    while stack:
        packed = stack.pop()
        order.append(packed)
        stack.extend(packed.children)
    return order[::-1]


def _breadth_first(root: _PackedNode) -> List[_PackedNode]:
    order, queue = [], deque([root])
    while queue:
        packed = queue.popleft()
        order.append(packed)
        queue.extend(packed.children)
    return order


def _sum_sizes(order: List[_PackedNode], sum_func: SizeFunction):
    for packed in order:
        if packed.children:
            packed.value = sum(child.value for child in packed.children)
            continue
        if packed.node is None:
            # an empty cluster, nothing to size
            packed.value = 0.0
            continue
        size = float(sum_func(packed.node))
        if not math.isfinite(size) or size < 0:
            raise InvalidInputError(
                f"The size of node {packed.key!r} should be a non negative number, got {size}."
            )
        packed.value = size


def _pack_radii(order: List[_PackedNode]):
    """Radii and child offsets relative to the parent center, bottom-up."""
    for packed in order:
        if not packed.children:
            packed.r = math.sqrt(packed.value)
            continue
        centers, radius = pack_siblings([child.r for child in packed.children])
        for child, (dx, dy) in zip(packed.children, centers):
            child.x, child.y = float(dx), float(dy)
        packed.r = radius


def pack_cluster(
    config: PackConfig,
    nodes: Sequence[HierarchyNode],
    cluster: int = 0,
    verbose: bool = False,
) -> List[CircleDescriptor]:
    """Compute a circle packing of one cluster.

    A synthetic root whose children are ``nodes`` encloses the whole
    cluster. Every circle contains its children and siblings never overlap.
    The packing fills ``min(width, height)`` and its center is moved from
    ``(width / 2, height / 2)`` to ``(center_x, center_y)``.

    Parameters
    ----------
    config: PackConfig
        Area, center and size function of the packing.
    nodes: sequence of HierarchyNode
        Top level nodes of the cluster.
    cluster: int (default 0)
        Index stored in the descriptors, used when several clusters are laid out.
    verbose: bool (default False)
        Print a summary of the packing.

    Returns
    -------
    descriptors: list of CircleDescriptor
        All nodes in breadth first order, the synthetic root (depth 0) first.
    """
    config.validate()

    root = _build_tree(nodes)
    order = _post_order(root)
    _sum_sizes(order, config.sum_func)
    _pack_radii(order)

    # Scale so the root fills the smaller side of the area.
    scale = min(config.width, config.height) / (2 * root.r) if root.r > 0 else 0.0
    shift = np.array([config.center_x - config.width / 2, config.center_y - config.height / 2])
    root.x, root.y = config.width / 2, config.height / 2

    descriptors = []
    for packed in _breadth_first(root):
        if packed.parent is not None:
            packed.x = packed.parent.x + scale * packed.x
            packed.y = packed.parent.y + scale * packed.y
        x, y = np.array([packed.x, packed.y]) + shift
        descriptors.append(
            CircleDescriptor(
                x=float(x),
                y=float(y),
                r=packed.r * scale,
                depth=packed.depth,
                key=packed.key,
                parent_key=None if packed.parent is None else packed.parent.key,
                value=packed.value,
                cluster=cluster,
                path=packed.path,
                node=packed.node,
            )
        )

    if verbose:
        print(
            f"Packed cluster {cluster}: {len(descriptors) - 1} nodes, "
            f"radius {root.r * scale:.2f} at ({config.center_x:.2f}, {config.center_y:.2f})."
        )
    return descriptors
