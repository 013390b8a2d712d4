import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

from membrane_distillation.agmd.config import load_design
from membrane_distillation.agmd.sweep import plot_sweep, sweep_segment_flux, sweep_to_dataframe, write_report

FLOWS = np.array([0.05, 0.1])
VACUUM = np.array([-81325.0, -61325.0])


@pytest.fixture(scope="module")
def results():
    return sweep_segment_flux(load_design(), FLOWS, VACUUM, 70.0, 25.0, 0.035)


def test_grid_shapes(results):
    assert results["feed_flow_grid"].shape == (2, 2)
    assert results["mass_flux"].shape == (2, 2)
    assert results["feed_flow_grid"][1, 0] == pytest.approx(0.1)
    assert results["vacuum_grid"][0, 1] == pytest.approx(-61325.0)
    assert results["converged"].all()


def test_trends(results):
    J = results["mass_flux"]
    # higher feed flow and deeper vacuum both raise the flux
    assert J[1, 0] > J[0, 0]
    assert J[0, 0] > J[0, 1]


def test_failed_points_are_nan():
    # 150 °C feed is outside the seawater property range
    res = sweep_segment_flux(load_design(), FLOWS[:1], VACUUM[:1], 150.0, 25.0, 0.035)
    assert np.isnan(res["mass_flux"][0, 0])
    assert not res["converged"][0, 0]


def test_dataframe_and_report(results, tmp_path):
    df = sweep_to_dataframe(results)
    assert len(df) == 4
    assert df["mass_flux_kg_m2_h"].iloc[0] == pytest.approx(df["mass_flux"].iloc[0]*3600.0)

    path = tmp_path / "results" / "report.csv"
    written = write_report(results, path)
    assert path.exists()
    reloaded = pd.read_csv(path)
    assert list(reloaded.columns) == list(written.columns)
    assert reloaded["mass_flux"].to_numpy() == pytest.approx(written["mass_flux"].to_numpy())


def test_plot_sweep(results):
    ax = plot_sweep(results, field="mass_flux")
    assert len(ax.get_lines()) == 2
    assert ax.get_ylabel() == "Mass flux (kg/m²/h)"
    with pytest.raises(ValueError):
        plot_sweep(results, field="colour")


def test_distillate_rate_scales_with_membrane_area(results):
    area = load_design().membrane_area
    assert results["distillate_rate"] == pytest.approx(results["mass_flux"]*area)
    df = sweep_to_dataframe(results)
    assert df["distillate_rate"].iloc[0] == pytest.approx(df["mass_flux"].iloc[0]*area)
    ax = plot_sweep(results, field="distillate_rate")
    assert ax.get_ylabel() == "Distillate rate (kg/h)"
