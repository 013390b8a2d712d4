"""Local heat and mass balance of one AGMD channel segment.

Couples the channel, membrane, polarization and flux closures into the
residual vector of a single segment and solves it with ``scipy.optimize.fsolve``.
The segment is local: bulk feed and coolant conditions are inputs, and
nothing is marched along the channel.

Heat path (W/m²), feed → coolant:
    feed film      q_f = h_f · (T_f - T_fm)
    membrane       q_m = J·Δh_vap + (k_m/δ_m) · (T_fm - T_mg)
    air gap        q_g = J·Δh_vap + (k_g/δ_g) · (T_mg - T_cf)
    plate+coolant  q_c = U_c · (T_cf - T_c),  U_c = 1/(1/h_c + δ_p/k_p)

Unknowns: T_fm, T_mg, T_cf and J. At convergence q_f = q_m = q_g = q_c and J
equals the flux closure evaluated at the polarized interfacial salinity.

Module Summary:
- Classes:
    - ``SegmentResult``: Converged interface state, fluxes and transfer coefficients.
- Functions:
    - ``gap_conductivity(air_conductivity, spacer_porosity, spacer_conductivity)``: Parallel mixing.
    - ``cooling_transmittance(h_cool, plate_thickness, plate_conductivity)``: U_c (W/m²/K).
    - ``solve_segment(state, feed_channel, coolant_channel, membrane, air_gap, ...)``: Segment solution.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
from scipy.optimize import fsolve

from .channel import channel_heat_transf_coef, channel_mass_transf_coef
from .constants import ATM_PRESSURE
from .flux import evaluate_closure
from .parameters import (
    AirGapParameters,
    ChannelGeometry,
    FluxResult,
    MembraneParameters,
    MoistAirProperties,
    OperatingState,
    SaltWaterProperties,
)
from .polarization import salt_water_concentration
from .properties import latent_heat, moist_air_properties, salt_water_properties, water_vapor_pressure

# Residual scales: heat flux (W/m²) and mass flux (kg/m²/s)
HEAT_FLUX_SCALE = 1.0e3
MASS_FLUX_SCALE = 1.0e-3


@dataclass(frozen=True, slots=True)
class SegmentResult:
    state: OperatingState            # input state with interface values filled in
    mass_flux: float                 # kg/m²/s
    heat_flux: float                 # W/m²
    feed_heat_transf_coef: float     # W/m²/K
    cool_heat_transf_coef: float     # W/m²/K
    feed_mass_transf_coef: float     # m/s
    residual_norm: float
    converged: bool
    message: str

    @property
    def flux(self) -> FluxResult:
        return FluxResult(mass_flux=self.mass_flux, heat_flux=self.heat_flux)


def gap_conductivity(air_conductivity: float, spacer_porosity: float, spacer_conductivity: float) -> float:
    """Air gap conductivity with the gap spacer in parallel, k_g = ε·k_a + (1-ε)·k_s."""
    return spacer_porosity*air_conductivity + (1.0 - spacer_porosity)*spacer_conductivity


def cooling_transmittance(h_cool: float, plate_thickness: float, plate_conductivity: float) -> float:
    """Overall coefficient from the condensate film to the coolant bulk, in W/m²/K."""
    return 1.0 / (1.0/h_cool + plate_thickness/plate_conductivity)


def solve_segment(
        state: OperatingState,
        feed_channel: ChannelGeometry,
        coolant_channel: ChannelGeometry,
        membrane: MembraneParameters,
        air_gap: AirGapParameters,
        water_props: Callable[[float, float, float], SaltWaterProperties] = salt_water_properties,
        air_props: Callable[[float, float], MoistAirProperties] = moist_air_properties,
        vapor_pressure: Callable[[float, float], float] = water_vapor_pressure,
        latent_heat_func: Callable[[float], float] = latent_heat,
        initial_guess: Optional[np.ndarray] = None,
        xtol: float = 1.49012e-08,
        strict: bool = False,
        verbose: bool = False,
) -> SegmentResult:
    """Solve the coupled heat and mass balance of one segment.

    Args:
        state: Bulk operating point (interface fields are ignored on input)
        feed_channel: Feed channel geometry
        coolant_channel: Coolant channel geometry
        membrane: Membrane design parameters
        air_gap: Air gap, gap spacer and condensing plate parameters
        water_props: Callable (T °C, salinity, gauge pressure Pa) -> SaltWaterProperties
        air_props: Callable (T °C, absolute pressure Pa) -> MoistAirProperties
        vapor_pressure: Callable (T °C, salinity) -> vapor pressure (Pa)
        latent_heat_func: Callable (T °C) -> evaporation enthalpy (J/kg)
        initial_guess: Optional [T_fm, T_mg, T_cf, J] starting point (°C, kg/m²/s)
        xtol: Relative tolerance passed to fsolve
        strict: Validate every input before solving (raises InvalidPhysicalInput)
        verbose: Print solver diagnostics

    Returns:
        SegmentResult; ``converged`` is False when fsolve did not reach ``xtol``,
        in which case the last iterate is returned.

    Example:
        >>> design = load_design()
        >>> res = solve_segment(design.operating_state(70.0, 25.0, 0.035),
        ...                     design.feed_channel, design.coolant_channel,
        ...                     design.membrane, design.air_gap)
        >>> print(f"J = {res.mass_flux*3600:.2f} kg/m²/h")
    """
    if strict:
        state.validate()
        feed_channel.validate()
        coolant_channel.validate()
        membrane.validate()
        air_gap.validate()

    T_f, T_c = state.feed_temperature, state.cool_temperature
    S_f, S_c = state.feed_salinity, state.cool_salinity
    p_abs = ATM_PRESSURE + state.vacuum_pressure

    # ==================== Bulk Properties ====================
    feed_bulk = water_props(T_f, S_f, 0.0)
    cool_bulk = water_props(T_c, S_c, 0.0)

    def density_func(T, p):
        return water_props(T, 0.0, p).density

    def coefficients(T_fm, T_cf):
        feed_wall = water_props(T_fm, S_f, 0.0)
        cool_wall = water_props(T_cf, S_c, 0.0)
        h_f = channel_heat_transf_coef(feed_bulk, feed_wall, state.feed_mass_flow_rate,
                                       feed_channel.height, feed_channel.width,
                                       feed_channel.number_channels, feed_channel.spacer_porosity)
        k_f = channel_mass_transf_coef(feed_bulk, feed_wall, state.feed_mass_flow_rate,
                                       feed_channel.height, feed_channel.width,
                                       feed_channel.number_channels, feed_channel.spacer_porosity)
        h_c = channel_heat_transf_coef(cool_bulk, cool_wall, state.cool_mass_flow_rate,
                                       coolant_channel.height, coolant_channel.width,
                                       coolant_channel.number_channels, coolant_channel.spacer_porosity)
        return h_f, k_f, h_c

    def interface_state(T_fm, T_mg, T_cf, J, k_f):
        S_m = salt_water_concentration(k_f, T_f, S_f, J, density_func=density_func)
        return state.with_interface(
            feed_wall_temperature=T_fm,
            gap_wall_temperature=T_mg,
            film_temperature=T_cf,
            feed_membrane_pressure=vapor_pressure(T_fm, S_m),
            film_boundary_pressure=vapor_pressure(T_cf, 0.0),
            interfacial_salinity=S_m,
        )

    def balance(x):
        T_fm, T_mg, T_cf, J = x[0], x[1], x[2], x[3]*MASS_FLUX_SCALE
        h_f, k_f, h_c = coefficients(T_fm, T_cf)
        local = interface_state(T_fm, T_mg, T_cf, J, k_f)
        closure = evaluate_closure(local, membrane, air_gap.thickness, air_props, latent_heat_func)

        T_gap = 0.5*(T_mg + T_cf)
        k_g = gap_conductivity(air_props(T_gap, p_abs).thermal_conductivity,
                               air_gap.spacer_porosity, air_gap.spacer_conductivity)

        q_f = h_f*(T_f - T_fm)
        q_m = closure.heat_flux
        q_g = closure.mass_flux*latent_heat_func(T_fm) + k_g/air_gap.thickness*(T_mg - T_cf)
        q_c = cooling_transmittance(h_c, air_gap.plate_thickness, air_gap.plate_conductivity)*(T_cf - T_c)
        return local, closure, (h_f, k_f, h_c), np.array([
            (q_f - q_m)/HEAT_FLUX_SCALE,
            (q_m - q_g)/HEAT_FLUX_SCALE,
            (q_g - q_c)/HEAT_FLUX_SCALE,
            (J - closure.mass_flux)/MASS_FLUX_SCALE,
        ])

    def residuals(x):
        try:
            return balance(x)[3]
        except ValueError:
            # Property lookups outside the liquid range; push the iterate back
            return np.full(4, 1e6)

    # ==================== Initial Guess ====================
    if initial_guess is None:
        dT = T_f - T_c
        x0 = np.array([T_f - 0.1*dT, T_f - 0.2*dT, T_c + 0.2*dT, 1.0])
    else:
        x0 = np.array(initial_guess, dtype=float)
        x0[3] = x0[3]/MASS_FLUX_SCALE

    # ==================== Solve ====================
    x, info, ier, message = fsolve(residuals, x0, xtol=xtol, full_output=True)
    converged = ier == 1

    local, closure, (h_f, k_f, h_c), res = balance(x)
    residual_norm = float(np.linalg.norm(res))

    if verbose:
        mark = "✓" if converged else "✗"
        print(f"  {mark} segment T_f={T_f:.2f} °C, T_c={T_c:.2f} °C: "
              f"T_fm={local.feed_wall_temperature:.2f}, T_mg={local.gap_wall_temperature:.2f}, "
              f"T_cf={local.film_temperature:.2f} °C, J={closure.mass_flux*3600:.3f} kg/m²/h, "
              f"q={closure.heat_flux:.1f} W/m² ({info['nfev']} evals, |r|={residual_norm:.2e})")
        if not converged:
            print(f"    fsolve: {message}")

    return SegmentResult(
        state=local,
        mass_flux=closure.mass_flux,
        heat_flux=closure.heat_flux,
        feed_heat_transf_coef=h_f,
        cool_heat_transf_coef=h_c,
        feed_mass_transf_coef=k_f,
        residual_norm=residual_norm,
        converged=converged,
        message=message,
    )
