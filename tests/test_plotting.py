import unittest

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from utils import generate_random_hierarchy  # noqa: E402

from clusterpack import GridConfig, MultiCluster, layout_clusters, node_value  # noqa: E402
from clusterpack.plotting import plot_circles  # noqa: E402


class TestPlotting(unittest.TestCase):
    def test_plot_circles_draws_every_descriptor(self):
        config = GridConfig().with_size(400, 300).with_sum(node_value)
        descriptors = layout_clusters(
            config, MultiCluster([generate_random_hierarchy(seed=s) for s in range(3)])
        )

        ax = plot_circles(descriptors, title="three clusters", draw_labels=True)

        self.assertEqual(len(ax.patches), len(descriptors))
        self.assertEqual(ax.get_title(), "three clusters")
        bottom, top = ax.get_ylim()
        self.assertGreater(bottom, top)
        plt.close(ax.figure)

    def test_plot_circles_empty(self):
        fig, ax = plt.subplots()

        self.assertIs(plot_circles([], ax=ax), ax)
        self.assertEqual(len(ax.patches), 0)
        plt.close(fig)
