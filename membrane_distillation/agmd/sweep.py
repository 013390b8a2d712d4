"""Operating-point sweeps and CSV/plot reporting for AGMD segments.

Note: Requires CoolProp (through the default property provider).

Module Summary:
- Functions:
    - ``sweep_segment_flux(design, feed_flow_rates, vacuum_pressures, ...)``:
        2D map of segment fluxes over feed flow rate and vacuum pressure.
    - ``sweep_to_dataframe(results)``: Flatten a sweep into a pandas DataFrame.
    - ``write_report(results, path)``: Write a sweep to CSV.
    - ``plot_sweep(results, field='mass_flux', ax=None)``: Plot a field versus feed flow rate.
"""

from dataclasses import replace
from pathlib import Path
from typing import Dict, Optional, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .config import ModuleDesign
from .segment import solve_segment

_FIELDS = (
    "mass_flux",
    "distillate_rate",
    "heat_flux",
    "feed_wall_temperature",
    "gap_wall_temperature",
    "film_temperature",
    "interfacial_salinity",
    "feed_heat_transf_coef",
    "cool_heat_transf_coef",
)

_LABELS = {
    "mass_flux": "Mass flux (kg/m²/h)",
    "distillate_rate": "Distillate rate (kg/h)",
    "heat_flux": "Heat flux (W/m²)",
    "feed_wall_temperature": "Feed/membrane temperature (°C)",
    "gap_wall_temperature": "Membrane/gap temperature (°C)",
    "film_temperature": "Condensate film temperature (°C)",
    "interfacial_salinity": "Interfacial salinity (-)",
    "feed_heat_transf_coef": "Feed h (W/m²/K)",
    "cool_heat_transf_coef": "Coolant h (W/m²/K)",
}


def sweep_segment_flux(
        design: ModuleDesign,
        feed_flow_rates: np.ndarray,
        vacuum_pressures: np.ndarray,
        feed_temperature: float,
        cool_temperature: float,
        feed_salinity: float,
        cool_salinity: Optional[float] = None,
        verbose: bool = False,
        **solver_kwargs,
) -> Dict[str, np.ndarray]:
    """Solve one segment over a grid of feed flow rates and vacuum pressures.

    Args:
        design: Module design (geometry, membrane, air gap, coolant flow)
        feed_flow_rates: Feed mass flow rates to sweep (kg/s)
        vacuum_pressures: Gauge vacuum pressures to sweep (Pa)
        feed_temperature: Feed bulk temperature (°C)
        cool_temperature: Coolant bulk temperature (°C)
        feed_salinity: Feed bulk salinity (mass fraction)
        cool_salinity: Coolant salinity, defaults to the feed salinity
        verbose: Print one line per evaluated point
        **solver_kwargs: Passed through to ``solve_segment``

    Returns:
        Dictionary of 2D arrays with shape (len(feed_flow_rates), len(vacuum_pressures)):
            - feed_flow_grid, vacuum_grid: meshgrid of the swept inputs
            - one array per quantity in mass_flux, distillate_rate (mass flux
              times the design membrane area, kg/s), heat_flux, interface
              temperatures, interfacial_salinity, feed/coolant h
            - converged: Boolean solver convergence flags

    Note:
        Points whose evaluation raises ValueError (property lookups out of
        range, invalid inputs with ``strict=True``) are stored as NaN with
        ``converged=False``.

    Example:
        >>> results = sweep_segment_flux(load_design(), np.linspace(0.04, 0.12, 5),
        ...                              np.array([-81325.0, -61325.0]), 70.0, 25.0, 0.035)
        >>> write_report(results, "results/report.csv")
    """
    # ==================== Setup Parameter Grids ====================
    feed_flow_rates = np.array(feed_flow_rates, dtype=float)
    vacuum_pressures = np.array(vacuum_pressures, dtype=float)
    FLOW, VAC = np.meshgrid(feed_flow_rates, vacuum_pressures, indexing="ij")

    out = {name: np.full_like(FLOW, np.nan) for name in _FIELDS}
    converged = np.zeros_like(FLOW, dtype=bool)

    # ==================== Loop Over All Operating Points ====================
    for i, m_feed in enumerate(feed_flow_rates):
        for j, p_vac in enumerate(vacuum_pressures):
            point = replace(design, feed_mass_flow_rate=m_feed, vacuum_pressure=p_vac)
            state = point.operating_state(feed_temperature, cool_temperature, feed_salinity, cool_salinity)
            try:
                res = solve_segment(state, point.feed_channel, point.coolant_channel,
                                    point.membrane, point.air_gap, verbose=verbose, **solver_kwargs)
            except ValueError as e:
                if verbose:
                    print(f"  ✗ m_feed={m_feed:.4f} kg/s, p_vac={p_vac:.0f} Pa FAILED - {type(e).__name__}: {str(e)[:60]}")
                continue

            out["mass_flux"][i, j] = res.mass_flux
            out["distillate_rate"][i, j] = res.mass_flux*point.membrane_area
            out["heat_flux"][i, j] = res.heat_flux
            out["feed_wall_temperature"][i, j] = res.state.feed_wall_temperature
            out["gap_wall_temperature"][i, j] = res.state.gap_wall_temperature
            out["film_temperature"][i, j] = res.state.film_temperature
            out["interfacial_salinity"][i, j] = res.state.interfacial_salinity
            out["feed_heat_transf_coef"][i, j] = res.feed_heat_transf_coef
            out["cool_heat_transf_coef"][i, j] = res.cool_heat_transf_coef
            converged[i, j] = res.converged

    return dict(feed_flow_grid=FLOW, vacuum_grid=VAC, converged=converged, **out)


def sweep_to_dataframe(results: Dict[str, np.ndarray]) -> pd.DataFrame:
    """Flatten a sweep result into one row per operating point."""
    df = pd.DataFrame({
        "feed_mass_flow_rate": results["feed_flow_grid"].ravel(),
        "vacuum_pressure": results["vacuum_grid"].ravel(),
        **{name: results[name].ravel() for name in _FIELDS},
        "converged": results["converged"].ravel(),
    })
    df["mass_flux_kg_m2_h"] = df["mass_flux"]*3600.0
    return df


def write_report(results: Dict[str, np.ndarray], path: Union[str, Path]) -> pd.DataFrame:
    """Write a sweep to CSV (creating parent folders) and return the DataFrame."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = sweep_to_dataframe(results)
    df.to_csv(path, index=False)
    return df


def plot_sweep(results: Dict[str, np.ndarray], field: str = "mass_flux", ax=None, show: bool = False):
    """Plot a swept quantity versus feed flow rate, one line per vacuum pressure."""
    if field not in _LABELS:
        raise ValueError(f"Unknown field {field!r}; choose one of {', '.join(_LABELS)}")
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 6))

    values = results[field]*3600.0 if field in ("mass_flux", "distillate_rate") else results[field]
    flows = results["feed_flow_grid"][:, 0]
    for j, p_vac in enumerate(results["vacuum_grid"][0, :]):
        ax.plot(flows, values[:, j], marker="o", label=f"p_vac = {p_vac/1e3:.1f} kPa")

    ax.set_xlabel("Feed mass flow rate (kg/s)")
    ax.set_ylabel(_LABELS[field])
    ax.grid(True)
    ax.legend()
    if show:
        plt.show()
    return ax
