from typing import Optional, Sequence, Tuple

import numpy as np

from clusterpack.descriptors import CircleDescriptor


def plot_circles(
    descriptors: Sequence[CircleDescriptor],
    ax=None,
    title: Optional[str] = None,
    cmap: str = "Greys",
    draw_labels: bool = False,
    figsize: Tuple[int, int] = (8, 8),
    invert_y: bool = True,
):
    """Draw one filled circle per descriptor, darker with depth.

    The y axis is inverted by default so that the picture matches screen
    coordinates, where the layout origin is the top left corner.
    """
    import matplotlib
    import matplotlib.pyplot as plt
    from matplotlib.patches import Circle

    if ax is None:
        _, ax = plt.subplots(figsize=figsize)
    if not descriptors:
        return ax

    depths = np.array([d.depth for d in descriptors])
    colors = matplotlib.colormaps[cmap](np.linspace(0.3, 0.9, depths.max() - depths.min() + 1))
    xs, ys = [], []
    for d in descriptors:
        ax.add_patch(
            Circle(
                (d.x, d.y),
                d.r,
                facecolor=colors[d.depth - depths.min()],
                edgecolor="k",
                linewidth=0.5,
                alpha=0.8,
            )
        )
        if draw_labels and d.is_leaf:
            ax.text(d.x, d.y, f"{d.key}", ha="center", va="center", fontsize=7)
        xs += [d.x - d.r, d.x + d.r]
        ys += [d.y - d.r, d.y + d.r]

    xmin, xmax = min(xs), max(xs)
    ymin, ymax = min(ys), max(ys)
    padx = 0.04 * (xmax - xmin) if xmax > xmin else 1.0
    pady = 0.04 * (ymax - ymin) if ymax > ymin else 1.0
    ax.set_xlim(xmin - padx, xmax + padx)
    if invert_y:
        ax.set_ylim(ymax + pady, ymin - pady)
    else:
        ax.set_ylim(ymin - pady, ymax + pady)
    ax.set_aspect("equal", "box")
    if title:
        ax.set_title(title)
    return ax
