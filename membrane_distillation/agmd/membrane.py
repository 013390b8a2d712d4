"""Membrane and air-gap transport: effective conductivity and vapor permeability.

Module Summary:
- Functions:
    - ``membrane_conductivity(pore_air_prop, polymer_conductivity, membrane_porosity)``:
        Maxwell mixing rule for the porous membrane (W/m/K).
    - ``molecular_diffusion(membrane_porosity, membrane_tortuosity, temperature)``:
        Pressure-diffusivity product of water vapor in air (Pa·m²/s), temperature in K.
    - ``knudsen_diffusion(membrane_porosity, membrane_tortuosity, pore_diameter, temperature)``:
        Knudsen diffusivity in the pores (m²/s), temperature in K.
    - ``effective_diffusivity(molecular_diffusivity, knudsen_diffusivity, vacuum_pressure)``:
        Series combination of both regimes.
    - ``membrane_permeability(...)``: Membrane permeability (kg/m²/s/Pa), temperature in °C.
    - ``gap_permeability(...)``: Stagnant air-gap permeability (kg/m²/s/Pa), temperature in °C.
    - ``series_permeability(membrane_perm, gap_perm)``: Membrane and gap resistances in series.

Reference:
    K.M. Lisboa, D.B. Moraes, C.P. Naveira-Cotta, R.M. Cotta, Analysis of the
    membrane effects on the energy efficiency of water desalination in a direct
    contact membrane distillation (DCMD) system with heat recovery. Appl.
    Thermal Eng. 182 (2021) 116063.
"""

import math

from ..dimensionless import C2K
from .constants import (
    ATM_PRESSURE,
    GAS_CONSTANT,
    MAXWELL_PREFACTOR,
    MOLECULAR_DIFFUSION_EXPONENT,
    MOLECULAR_DIFFUSION_PREFACTOR,
    WATER_MOLAR_MASS,
)
from .parameters import MembraneParameters, MoistAirProperties


def membrane_conductivity(pore_air_prop: MoistAirProperties,
                          polymer_conductivity: float,
                          membrane_porosity: float) -> float:
    """Compute the effective thermal conductivity of a porous membrane.

    Maxwell two-phase model with pore air as continuous phase:
        β = (k_p - k_a) / (k_p + 2·k_a)
        k_eff = 0.93 · k_a · (1 + 2β(1-ε)) / (1 - β(1-ε))

    Args:
        pore_air_prop: Properties of the moist air in the pores
        polymer_conductivity: Membrane polymer conductivity (W/m/K)
        membrane_porosity: Membrane porosity (dimensionless)

    Returns:
        Effective conductivity (W/m/K)

    Note:
        The 0.93 prefactor makes the solid limit (ε=0) 0.93·k_p and the fully
        porous limit (ε=1) 0.93·k_a.
    """
    air_conductivity = pore_air_prop.thermal_conductivity
    beta = (polymer_conductivity - air_conductivity) / (polymer_conductivity + 2.0*air_conductivity)
    solid = 1.0 - membrane_porosity
    return MAXWELL_PREFACTOR * air_conductivity * (1.0 + 2.0*beta*solid) / (1.0 - beta*solid)


def molecular_diffusion(membrane_porosity: float, membrane_tortuosity: float, temperature: float) -> float:
    """Pressure-diffusivity product P·D of water vapor in air, scaled by ε/τ.

    Args:
        membrane_porosity: Porosity (1.0 for free space)
        membrane_tortuosity: Tortuosity (1.0 for free space)
        temperature: Absolute temperature (K)

    Returns:
        P·D (Pa·m²/s)
    """
    return MOLECULAR_DIFFUSION_PREFACTOR * membrane_porosity / membrane_tortuosity \
        * temperature**MOLECULAR_DIFFUSION_EXPONENT


def knudsen_diffusion(membrane_porosity: float,
                      membrane_tortuosity: float,
                      pore_diameter: float,
                      temperature: float) -> float:
    """Knudsen diffusivity D_K = (d/3) · (ε/τ) · sqrt(8RT/(πM)).

    Args:
        membrane_porosity: Porosity (dimensionless)
        membrane_tortuosity: Tortuosity (dimensionless)
        pore_diameter: Mean pore diameter (m)
        temperature: Absolute temperature (K)

    Returns:
        Knudsen diffusivity (m²/s)
    """
    mean_speed = math.sqrt(8.0*GAS_CONSTANT*temperature / (math.pi*WATER_MOLAR_MASS))
    return pore_diameter/3.0 * membrane_porosity/membrane_tortuosity * mean_speed


def effective_diffusivity(molecular_diffusivity: float, knudsen_diffusivity: float, vacuum_pressure: float) -> float:
    """Combine the molecular and Knudsen regimes in series.

    D_eff = D_m · D_K / (D_m + P_total · D_K), P_total = P_atm + P_vac.
    Since D_m is a pressure-diffusivity product, this is 1/D_eff = 1/D_K + P/D_m.
    """
    total_pressure = ATM_PRESSURE + vacuum_pressure
    return molecular_diffusivity*knudsen_diffusivity / (molecular_diffusivity + total_pressure*knudsen_diffusivity)


def membrane_permeability(membrane_porosity: float,
                          membrane_tortuosity: float,
                          membrane_thickness: float,
                          pore_diameter: float,
                          temperature_membrane: float,
                          vacuum_pressure: float) -> float:
    """Water vapor permeability of the membrane, Π = M·D_eff/(R·T·δ).

    Args:
        membrane_porosity: Porosity (dimensionless)
        membrane_tortuosity: Tortuosity (dimensionless)
        membrane_thickness: Thickness (m)
        pore_diameter: Mean pore diameter (m)
        temperature_membrane: Mean membrane temperature (°C)
        vacuum_pressure: Gauge pressure of the air in the pores/gap (Pa)

    Returns:
        Permeability (kg/m²/s/Pa)
    """
    T = C2K(temperature_membrane)
    D_m = molecular_diffusion(membrane_porosity, membrane_tortuosity, T)
    D_K = knudsen_diffusion(membrane_porosity, membrane_tortuosity, pore_diameter, T)
    D_eff = effective_diffusivity(D_m, D_K, vacuum_pressure)
    return WATER_MOLAR_MASS*D_eff / (GAS_CONSTANT*T*membrane_thickness)


def gap_permeability(air_gap_thickness: float, temperature_gap: float, vacuum_pressure: float) -> float:
    """Water vapor permeability of the stagnant air gap (molecular diffusion only).

    Args:
        air_gap_thickness: Gap thickness (m)
        temperature_gap: Mean gap temperature (°C)
        vacuum_pressure: Gauge pressure in the gap (Pa)

    Returns:
        Permeability (kg/m²/s/Pa)
    """
    T = C2K(temperature_gap)
    D_m = molecular_diffusion(1.0, 1.0, T)
    return WATER_MOLAR_MASS*D_m / (GAS_CONSTANT*T*(ATM_PRESSURE + vacuum_pressure)*air_gap_thickness)


def series_permeability(membrane_perm: float, gap_perm: float) -> float:
    """Overall permeability of two resistances in series."""
    return membrane_perm*gap_perm / (membrane_perm + gap_perm)


def stack_permeability(membrane: MembraneParameters,
                       air_gap_thickness: float,
                       temperature_membrane: float,
                       temperature_gap: float,
                       vacuum_pressure: float) -> float:
    """Membrane plus air-gap permeability for a ``MembraneParameters`` design (temperatures in °C)."""
    perm_m = membrane_permeability(membrane.porosity, membrane.tortuosity, membrane.thickness,
                                   membrane.pore_diameter, temperature_membrane, vacuum_pressure)
    perm_g = gap_permeability(air_gap_thickness, temperature_gap, vacuum_pressure)
    return series_permeability(perm_m, perm_g)
