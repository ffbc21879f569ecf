import math
import time
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from clusterpack.descriptors import CircleDescriptor
from clusterpack.errors import InvalidInputError
from clusterpack.hierarchy import ClusterInput, SizeFunction, as_clusters, constant_size
from clusterpack.packer import PackConfig, check_area, pack_cluster
from clusterpack.utils import format_count, format_elapsed


@dataclass(frozen=True)
class GridConfig:
    """Settings of a grid of circle packings.

    ``width`` and ``height`` describe the whole drawing area and have to be
    set before laying out. Every leaf has the same size unless ``sum_func``
    is replaced.
    """

    width: Optional[float] = None
    height: Optional[float] = None
    sum_func: SizeFunction = constant_size

    def with_size(self, width: float, height: float) -> "GridConfig":
        return replace(self, width=width, height=height)

    def with_sum(self, sum_func: SizeFunction) -> "GridConfig":
        return replace(self, sum_func=sum_func)

    def validate(self):
        check_area(self.width, self.height, "Cluster")


def grid_shape(n_clusters: int) -> Tuple[int, int]:
    """Rows and columns of the near square grid holding ``n_clusters`` cells."""
    if n_clusters < 1:
        raise InvalidInputError(f"At least one cluster is needed, got {n_clusters}.")
    n_rows = math.isqrt(n_clusters)
    n_cols = -(-n_clusters // n_rows)
    return n_rows, n_cols


def axis_centers(extent: float, n_divisions: int) -> np.ndarray:
    """Midpoints of ``n_divisions`` equal cells covering ``[0, extent]``."""
    return extent * (2 * np.arange(n_divisions) + 1) / (2 * n_divisions)


def cell_centers(width: float, height: float, n_clusters: int) -> np.ndarray:
    """Centers of the first ``n_clusters`` grid cells in row-major order.

    Returns an array of shape (n_clusters, 2). Trailing cells of the last row
    stay empty when the grid has more cells than clusters.
    """
    n_rows, n_cols = grid_shape(n_clusters)
    xs = axis_centers(width, n_cols)
    ys = axis_centers(height, n_rows)
    cells = np.arange(n_clusters)
    return np.stack([xs[cells % n_cols], ys[cells // n_cols]], axis=1)


def layout_clusters(
    config: GridConfig, data: ClusterInput, verbose: bool = False
) -> List[CircleDescriptor]:
    """Lay out independent circle packings on a grid covering the area.

    Every cluster is packed inside its own cell of size
    ``(width / n_cols, height / n_rows)``, clusters are assigned to cells row by
    row. The result concatenates the descriptors of all clusters in cluster
    order, without the synthetic root of each packing.
    """
    config.validate()
    clusters = as_clusters(data)
    if not clusters:
        raise InvalidInputError("The cluster list is empty.")

    n_rows, n_cols = grid_shape(len(clusters))
    centers = cell_centers(config.width, config.height, len(clusters))
    cell_config = PackConfig(sum_func=config.sum_func).with_size(
        config.width / n_cols, config.height / n_rows
    )
    if verbose:
        print(f"Packing {len(clusters)} clusters on a {n_rows}x{n_cols} grid...")

    start = time.perf_counter()
    descriptors: List[CircleDescriptor] = []
    for i, nodes in enumerate(tqdm(clusters, disable=not verbose)):
        cx, cy = centers[i]
        packed = pack_cluster(
            cell_config.with_center(float(cx), float(cy)), nodes, cluster=i
        )
        descriptors.extend(d for d in packed if d.has_parent)

    if verbose:
        print(
            f"Laid out {format_count(len(descriptors), 'circle')} in {format_elapsed(time.perf_counter() - start)}."
        )
    return descriptors
