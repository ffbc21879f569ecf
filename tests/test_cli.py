import tempfile
import unittest
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pandas as pd  # noqa: E402
from typer.testing import CliRunner  # noqa: E402

from clusterpack.cli import app  # noqa: E402
from clusterpack.descriptors import FRAME_COLUMNS  # noqa: E402
from clusterpack.errors import InvalidInputError  # noqa: E402


class TestPackCsvCommand(unittest.TestCase):
    def setUp(self):
        self.directory = tempfile.TemporaryDirectory()
        self.path = Path(self.directory.name)
        self.csv_path = self.path / "data.csv"
        pd.DataFrame(
            {
                "groupid": ["a", "b", "c", "a", "d", "e"],
                "value": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
            }
        ).to_csv(self.csv_path, index=False)
        self.runner = CliRunner()

    def tearDown(self):
        self.directory.cleanup()

    def test_writes_one_row_per_group(self):
        output_path = self.path / "circles.csv"

        result = self.runner.invoke(
            app, [str(self.csv_path), str(output_path), "--n-clusters", "2", "--check"]
        )

        self.assertEqual(result.exit_code, 0, result.output)
        circles = pd.read_csv(output_path)
        self.assertEqual(list(circles.columns), FRAME_COLUMNS)
        self.assertEqual(len(circles), 5)
        self.assertEqual(sorted(circles["key"]), ["a", "b", "c", "d", "e"])
        self.assertEqual(sorted(circles["cluster"].unique()), [0, 1])
        self.assertEqual(set(circles["parent_key"]), {"root"})
        self.assertEqual(circles.set_index("key").loc["a", "value"], 5.0)
        self.assertIn("Containment violations: 0, overlap violations: 0.", result.output)

    def test_exports_plot(self):
        output_path = self.path / "circles.csv"
        plot_path = self.path / "circles.png"

        result = self.runner.invoke(
            app, [str(self.csv_path), str(output_path), "--plot-path", str(plot_path)]
        )

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(plot_path.exists())

    def test_missing_value_column(self):
        result = self.runner.invoke(
            app,
            [str(self.csv_path), str(self.path / "circles.csv"), "--value-column", "amount"],
        )

        self.assertNotEqual(result.exit_code, 0)
        self.assertIsInstance(result.exception, InvalidInputError)
