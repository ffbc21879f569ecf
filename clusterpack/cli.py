from pathlib import Path
from typing import Optional, Tuple

import typer

from clusterpack.data_loading import load_records, nest_records, split_round_robin
from clusterpack.descriptors import descriptors_to_frame
from clusterpack.grid import GridConfig, layout_clusters
from clusterpack.hierarchy import node_value
from clusterpack.utils import format_count
from clusterpack.validation import containment_violations, overlap_violations


def main(
        csv_path: Path,
        output_path: Path,
        group_column: str = 'groupid',
        value_column: str = 'value',
        n_clusters: int = 1,
        width: float = 800.0,
        height: float = 600.0,
        plot_path: Optional[Path] = None,
        figsize: Tuple[int, int] = (10, 10),
        check: bool = False,
        verbose: bool = False
):
    """Lay out the groups of a CSV file as circle packings on a grid."""
    print(f'Loading {csv_path}...')
    records = load_records(csv_path)
    nodes = nest_records(records, group_column, value_column)
    print(f'Grouped {format_count(len(records), "record")} into {format_count(len(nodes), "group")}.')

    config = GridConfig().with_size(width, height).with_sum(node_value)
    descriptors = layout_clusters(config, split_round_robin(nodes, n_clusters), verbose=verbose)

    descriptors_to_frame(descriptors).to_csv(output_path, index=False)
    print(f'Wrote {format_count(len(descriptors), "circle")} to {output_path}.')

    if check:
        tol = 1e-6 * max(width, height)
        contained = containment_violations(descriptors, tol=tol)
        overlapping = overlap_violations(descriptors, tol=tol)
        print(f'Containment violations: {len(contained)}, overlap violations: {len(overlapping)}.')
        if contained or overlapping:
            raise typer.Exit(code=1)

    if plot_path is not None:
        import matplotlib.pyplot as plt

        from clusterpack.plotting import plot_circles

        print('Exporting layout plot...')
        fig, ax = plt.subplots(figsize=figsize)
        plot_circles(descriptors, ax=ax, title=f'{n_clusters} clusters')
        fig.savefig(plot_path)
        plt.close(fig)


app = typer.Typer(add_completion=False)
app.command()(main)
