from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple

import pandas as pd

from clusterpack.hierarchy import HierarchyNode


@dataclass(frozen=True)
class CircleDescriptor:
    """A positioned circle of the layout, one per hierarchy node."""

    x: float
    y: float
    r: float
    depth: int
    key: Any
    parent_key: Optional[Any]
    value: float
    cluster: int = 0
    path: Tuple[Any, ...] = ()
    node: Optional[HierarchyNode] = field(default=None, compare=False, repr=False)

    @property
    def has_parent(self) -> bool:
        return self.depth > 0

    @property
    def is_leaf(self) -> bool:
        return self.depth > 0 and self.node is not None and self.node.is_leaf


FRAME_COLUMNS = ["cluster", "key", "parent_key", "depth", "x", "y", "r", "value"]


def descriptors_to_frame(descriptors: Sequence[CircleDescriptor]) -> pd.DataFrame:
    return pd.DataFrame(
        [[getattr(d, column) for column in FRAME_COLUMNS] for d in descriptors],
        columns=FRAME_COLUMNS,
    )
