from pathlib import Path
from typing import List, Sequence, Union

import pandas as pd

from clusterpack.errors import InvalidInputError
from clusterpack.hierarchy import HierarchyNode, MultiCluster


def load_records(path: Union[Path, str]) -> pd.DataFrame:
    return pd.read_csv(Path(path))


def nest_records(
    records: pd.DataFrame, keys: Union[str, Sequence[str]], value: str
) -> List[HierarchyNode]:
    """Group flat records into a hierarchy and sum ``value`` per leaf group.

    Groups are nested in the order of ``keys`` and keep the order in which
    their key first appears in ``records``.

    Args:
        records: A frame with one row per record.
        keys: The column(s) to group by, outermost first.
        value: A numeric column summed within each leaf group.

    Returns:
        The top level nodes. Leaves carry the summed value and, as ``data``,
        the rows of their group.
    """
    keys = [keys] if isinstance(keys, str) else list(keys)
    if not keys:
        raise InvalidInputError("At least one key column is needed to nest records.")
    missing = [column for column in keys + [value] if column not in records.columns]
    if missing:
        raise InvalidInputError(f"Missing columns in records: {', '.join(missing)}.")

    values = pd.to_numeric(records[value], errors="coerce")
    if values.isna().any():
        raise InvalidInputError(f"Column {value!r} contains non numeric values.")
    records = records.assign(**{value: values})
    return _nest(records, keys, value)


def _nest(records: pd.DataFrame, keys: List[str], value: str) -> List[HierarchyNode]:
    key, rest = keys[0], keys[1:]
    nodes = []
    for group_key, group in records.groupby(key, sort=False):
        if rest:
            nodes.append(HierarchyNode(key=group_key, children=_nest(group, rest, value)))
        else:
            nodes.append(
                HierarchyNode(key=group_key, value=float(group[value].sum()), data=group)
            )
    return nodes


def split_round_robin(nodes: Sequence[HierarchyNode], n_clusters: int) -> MultiCluster:
    """Deal the nodes into ``n_clusters`` clusters, node i going to cluster i % n."""
    if n_clusters < 1:
        raise InvalidInputError(f"The number of clusters should be at least 1, got {n_clusters}.")
    nodes = list(nodes)
    return MultiCluster([nodes[i::n_clusters] for i in range(n_clusters)])
