"""
Tests for retirement band plotting.
"""

import pytest
import matplotlib.pyplot as plt
from unittest.mock import patch
from retiresim.model import SimulationResult
from retiresim.visualization import format_currency, plot_retirement_bands


class TestFormatCurrency:
    """Test suite for format_currency."""

    @pytest.mark.parametrize("value,expected", [
        (0, "$0"),
        (1234.4, "$1,234"),
        (1234.6, "$1,235"),
        (2500000, "$2,500,000"),
        (-50, "-$50"),
    ])
    def test_format(self, value, expected):
        assert format_currency(value) == expected


class TestPlotRetirementBands:
    """Test suite for plot_retirement_bands."""

    @pytest.fixture
    def results(self):
        return [
            SimulationResult(year=31, p10=900.0, p50=1000.0, p90=1100.0),
            SimulationResult(year=32, p10=950.0, p50=1100.0, p90=1300.0),
        ]

    def test_empty_results(self):
        """Nothing is drawn without data."""
        with patch("retiresim.visualization.plt.subplots") as mock_subplots:
            assert plot_retirement_bands([], show_plot=False) is False
            mock_subplots.assert_not_called()

    @patch("retiresim.visualization.plt.show")
    def test_plot_shows(self, mock_show, results):
        assert plot_retirement_bands(results, show_plot=True) is True
        mock_show.assert_called_once()

    def test_plot_three_bands(self, results):
        """The optimistic, median and pessimistic bands are drawn against age."""
        with patch("retiresim.visualization.plt.close") as mock_close:
            plot_retirement_bands(results, show_plot=False)
            mock_close.assert_called_once()

        ax = plt.gcf().axes[0]
        labels = [line.get_label() for line in ax.get_lines()]

        assert labels == ["Optimistic (90th %)", "Median (50th %)", "Pessimistic (10th %)"]
        assert ax.get_xlabel() == "Age"
        plt.close("all")

    def test_plot_save_output(self, results, tmp_path):
        output = tmp_path / "charts" / "bands.png"

        plot_retirement_bands(results, output_path=str(output), show_plot=False)

        assert output.exists()
