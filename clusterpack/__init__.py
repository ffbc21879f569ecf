from .descriptors import CircleDescriptor, descriptors_to_frame
from .errors import ConfigurationError, InvalidInputError
from .grid import GridConfig, cell_centers, grid_shape, layout_clusters
from .hierarchy import (
    HierarchyNode,
    MultiCluster,
    SingleCluster,
    constant_size,
    node_value,
    nodes_from_nest,
)
from .packer import PackConfig, pack_cluster
