"""CoolProp-based property provider for salt water and moist pore air.

The closure model consumes fluid properties as opaque lookups. This module is
the default provider: every function is deterministic, has no state, and
converts its Celsius temperature input to Kelvin exactly once before querying
CoolProp.

Note: CoolProp is required for this module to function.

Module Summary:
- Functions:
    - ``salt_water_fluid(salinity, fluid='MITSW')``: CoolProp incompressible fluid string.
    - ``salt_water_density(temperature, pressure)``: Seawater density at a gauge pressure.
    - ``nacl_diffusivity(temperature, dyn_viscosity)``: Stokes-Einstein NaCl diffusivity.
    - ``salt_water_properties(temperature, salinity, pressure=0.0)``: Full ``SaltWaterProperties``.
    - ``moist_air_properties(temperature, pressure, relative_humidity=1.0)``: Pore air ``MoistAirProperties``.
    - ``water_vapor_pressure(temperature, salinity=0.0)``: Equilibrium vapor pressure over (salt) water.
    - ``latent_heat(temperature)``: Evaporation enthalpy of water.
"""

from CoolProp.CoolProp import PropsSI

from ..dimensionless import C2K, Pr, Sc, frac2gkg
from .constants import (
    ATM_PRESSURE,
    NACL_DIFFUSIVITY_REF,
    NACL_DIFFUSIVITY_T_REF,
    WATER_VISCOSITY_REF,
)
from .parameters import MoistAirProperties, SaltWaterProperties


def salt_water_fluid(salinity: float, fluid: str = "MITSW") -> str:
    """Return the CoolProp incompressible mixture name for a salinity (mass fraction).

    Example:
        >>> salt_water_fluid(0.035)
        'INCOMP::MITSW[0.03500000]'
    """
    return f"INCOMP::{fluid}[{salinity:.8f}]"


def salt_water_density(temperature: float, pressure: float, salinity: float = 0.0) -> float:
    """Compute salt water density.

    Args:
        temperature: Temperature (°C)
        pressure: Gauge pressure (Pa); 0.0 means atmospheric
        salinity: Salt mass fraction (dimensionless), default 0.0

    Returns:
        Density (kg/m³)
    """
    return PropsSI("D", "T", C2K(temperature), "P", ATM_PRESSURE + pressure, salt_water_fluid(salinity))


def nacl_diffusivity(temperature: float, dyn_viscosity: float) -> float:
    """Estimate NaCl diffusivity in water by Stokes-Einstein scaling.

    Scales the 25 °C reference diffusivity with absolute temperature and the
    inverse of the solution viscosity: D = D_ref · (T/T_ref) · (μ_ref/μ).

    Args:
        temperature: Temperature (°C)
        dyn_viscosity: Solution dynamic viscosity at ``temperature`` (Pa·s)

    Returns:
        Mass diffusivity (m²/s)
    """
    return NACL_DIFFUSIVITY_REF * (C2K(temperature) / NACL_DIFFUSIVITY_T_REF) * (WATER_VISCOSITY_REF / dyn_viscosity)


def salt_water_properties(temperature: float, salinity: float, pressure: float = 0.0) -> SaltWaterProperties:
    """Evaluate salt water transport properties with CoolProp.

    Uses the MIT seawater incompressible fit (Sharqawy et al. 2010), valid for
    0-120 °C and salinity mass fractions 0-0.12.

    Args:
        temperature: Temperature (°C)
        salinity: Salt mass fraction (dimensionless)
        pressure: Gauge pressure (Pa), default 0.0

    Returns:
        SaltWaterProperties with density, viscosity, conductivity, specific
        heat, NaCl diffusivity, Prandtl and Schmidt numbers.

    Example:
        >>> props = salt_water_properties(60.0, 0.035)
        >>> props.prandtl  # ~3
    """
    T = C2K(temperature)
    p = ATM_PRESSURE + pressure
    fluid = salt_water_fluid(salinity)

    # Query CoolProp for thermophysical properties at given state
    rho = PropsSI("D", "T", T, "P", p, fluid)  # Density
    cp  = PropsSI("C", "T", T, "P", p, fluid)  # Specific heat at constant pressure
    k   = PropsSI("L", "T", T, "P", p, fluid)  # Thermal conductivity
    mu  = PropsSI("V", "T", T, "P", p, fluid)  # Dynamic viscosity

    D = nacl_diffusivity(temperature, mu)

    return SaltWaterProperties(
        density=rho,
        dyn_viscosity=mu,
        thermal_conductivity=k,
        specific_heat=cp,
        mass_diffusivity=D,
        prandtl=Pr(cp, mu, k),
        schmidt=Sc(mu, rho, D),
    )


def moist_air_properties(temperature: float, pressure: float, relative_humidity: float = 1.0) -> MoistAirProperties:
    """Evaluate the thermal conductivity of humid air filling the membrane pores.

    Mixes dry-air and saturated-vapor conductivities by vapor mole fraction,
    y = min(RH · p_sat / p, 1).

    Args:
        temperature: Temperature (°C)
        pressure: Absolute total pressure (Pa)
        relative_humidity: Relative humidity (0-1), default 1.0 (saturated pores)

    Returns:
        MoistAirProperties
    """
    T = C2K(temperature)
    p_sat = PropsSI("P", "T", T, "Q", 0, "Water")
    y_vapor = min(relative_humidity * p_sat / pressure, 1.0)

    k_air = PropsSI("L", "T", T, "P", pressure, "Air")
    k_vapor = PropsSI("L", "T", T, "Q", 1, "Water")

    return MoistAirProperties(thermal_conductivity=y_vapor * k_vapor + (1.0 - y_vapor) * k_air)


def water_vapor_pressure(temperature: float, salinity: float = 0.0) -> float:
    """Equilibrium vapor pressure over pure or salt water.

    Saturation pressure of pure water from CoolProp, lowered for salinity with
    p_sw = p_w / (1 + 0.57357 · S / (1000 - S)), S in g/kg (Sharqawy et al. 2010).

    Args:
        temperature: Temperature (°C)
        salinity: Salt mass fraction (dimensionless), default 0.0

    Returns:
        Vapor pressure (Pa)
    """
    p_w = PropsSI("P", "T", C2K(temperature), "Q", 0, "Water")
    S = frac2gkg(salinity)
    return p_w / (1.0 + 0.57357 * S / (1000.0 - S))


def latent_heat(temperature: float) -> float:
    """Water evaporation enthalpy h_v - h_l at a temperature (°C), in J/kg."""
    T = C2K(temperature)
    return PropsSI("H", "T", T, "Q", 1, "Water") - PropsSI("H", "T", T, "Q", 0, "Water")
