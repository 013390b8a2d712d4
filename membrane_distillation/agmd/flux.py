"""Trans-membrane water mass flux and heat flux closure.

``mass_flux`` is the closure evaluated by the outer solver once per iteration
and channel segment. It is a pure function of its arguments and holds no
state, so segments can be evaluated concurrently.

Module Summary:
- Functions:
    - ``mass_flux(...)``: Water flux through the membrane + air gap stack (kg/m²/s).
    - ``membrane_heat_flux(...)``: Latent plus conductive heat flux through the membrane (W/m²).
    - ``evaluate_closure(state, membrane, air_gap_thickness, ...)``: ``FluxResult`` for an
        ``OperatingState`` snapshot with its interface quantities filled in.
"""

from typing import Callable

from .constants import ATM_PRESSURE
from .membrane import gap_permeability, membrane_conductivity, membrane_permeability, series_permeability
from .parameters import FluxResult, MembraneParameters, MoistAirProperties, OperatingState
from .properties import latent_heat, moist_air_properties


def mass_flux(membrane_porosity: float,
              membrane_tortuosity: float,
              membrane_thickness: float,
              pore_diameter: float,
              air_gap_thickness: float,
              temperature_membrane: float,
              temperature_gap: float,
              feed_membrane_pressure: float,
              film_boundary_pressure: float,
              vacuum_pressure: float) -> float:
    """Compute the water mass flux across the membrane and the air gap.

    The membrane permeability (molecular + Knudsen) at the membrane
    temperature and the air-gap permeability (molecular) at the gap
    temperature are combined in series and multiplied by the vapor pressure
    difference between the feed/membrane interface and the condensate film.

    Args:
        membrane_porosity: Membrane porosity (dimensionless)
        membrane_tortuosity: Membrane tortuosity (dimensionless)
        membrane_thickness: Membrane thickness (m)
        pore_diameter: Mean pore diameter (m)
        air_gap_thickness: Air gap thickness (m)
        temperature_membrane: Mean membrane temperature (°C)
        temperature_gap: Mean air gap temperature (°C)
        feed_membrane_pressure: Vapor pressure at the feed side of the membrane (Pa)
        film_boundary_pressure: Vapor pressure at the condensate film surface (Pa)
        vacuum_pressure: Gauge pressure of the air in membrane and gap (Pa)

    Returns:
        Mass flux (kg/m²/s); positive from feed toward the condensate, sign
        follows feed_membrane_pressure - film_boundary_pressure.

    Example:
        >>> J = mass_flux(0.8, 1.5, 1e-4, 0.2e-6, 2e-3, 60.0, 60.0, 19946.0, 7000.0, -81325.0)
        >>> # J ~ 5e-3 kg/m²/s
    """
    perm_m = membrane_permeability(membrane_porosity, membrane_tortuosity, membrane_thickness,
                                   pore_diameter, temperature_membrane, vacuum_pressure)
    perm_g = gap_permeability(air_gap_thickness, temperature_gap, vacuum_pressure)
    return series_permeability(perm_m, perm_g) * (feed_membrane_pressure - film_boundary_pressure)


def membrane_heat_flux(mass_flux: float,
                       latent_heat: float,
                       membrane_conductivity: float,
                       membrane_thickness: float,
                       temperature_feed_side: float,
                       temperature_gap_side: float) -> float:
    """Heat flux through the membrane, q = J·Δh_vap + (k_m/δ_m)·(T_fm - T_mg), in W/m²."""
    return mass_flux*latent_heat + membrane_conductivity/membrane_thickness*(temperature_feed_side - temperature_gap_side)


def evaluate_closure(state: OperatingState,
                     membrane: MembraneParameters,
                     air_gap_thickness: float,
                     air_props: Callable[[float, float], MoistAirProperties] = moist_air_properties,
                     latent_heat_func: Callable[[float], float] = latent_heat) -> FluxResult:
    """Evaluate mass and heat flux for one operating state snapshot.

    Args:
        state: Operating state with ``feed_wall_temperature``, ``gap_wall_temperature``,
            ``film_temperature``, ``feed_membrane_pressure`` and ``film_boundary_pressure`` set
        membrane: Membrane design parameters
        air_gap_thickness: Air gap thickness (m)
        air_props: Callable (temperature °C, absolute pressure Pa) -> MoistAirProperties
        latent_heat_func: Callable (temperature °C) -> evaporation enthalpy (J/kg)

    Returns:
        FluxResult(mass_flux, heat_flux)

    Raises:
        ValueError: If an interface quantity of ``state`` is not set
    """
    missing = [name for name in ("feed_wall_temperature", "gap_wall_temperature", "film_temperature",
                                 "feed_membrane_pressure", "film_boundary_pressure")
               if getattr(state, name) is None]
    if missing:
        raise ValueError(f"Operating state is missing interface values: {', '.join(missing)}")

    T_fm = state.feed_wall_temperature
    T_mg = state.gap_wall_temperature
    T_membrane = 0.5*(T_fm + T_mg)
    T_gap = 0.5*(T_mg + state.film_temperature)

    J = mass_flux(membrane.porosity, membrane.tortuosity, membrane.thickness, membrane.pore_diameter,
                  air_gap_thickness, T_membrane, T_gap,
                  state.feed_membrane_pressure, state.film_boundary_pressure, state.vacuum_pressure)

    pore_air = air_props(T_membrane, ATM_PRESSURE + state.vacuum_pressure)
    k_m = membrane_conductivity(pore_air, membrane.polymer_conductivity, membrane.porosity)
    q = membrane_heat_flux(J, latent_heat_func(T_fm), k_m, membrane.thickness, T_fm, T_mg)

    return FluxResult(mass_flux=J, heat_flux=q)
