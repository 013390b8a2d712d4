"""Concentration polarization at the feed side of the membrane (film theory).

Water leaving the feed through the membrane leaves salt behind, so the
salinity at the membrane wall exceeds the bulk salinity by the factor
exp(J / (ρ·k_m)). A negative flux (back-flow toward the feed) dilutes the
wall instead.

Module Summary:
- Functions:
    - ``salinity_to_molarity(salinity, density)``: Mass fraction to mol/L.
    - ``molarity_to_salinity(molarity, density)``: mol/L back to mass fraction.
    - ``polarization_factor(mass_flux, density, mass_transfer_coef)``: exp(J/(ρ·k_m)).
    - ``salt_water_concentration(mass_transfer_coef, temperature, salinity, mass_flux)``:
        Interfacial salinity (mass fraction).
"""

import math
from typing import Callable

from .constants import NACL_DENSITY, NACL_MOLAR_MASS
from .properties import salt_water_density


def salinity_to_molarity(salinity: float, density: float) -> float:
    """Convert a NaCl mass fraction to molarity (mol/L).

    The solution volume per kg is taken as ideal mixing of water (density ρ)
    and solid NaCl (2160 kg/m³).
    """
    molarity = (1.0/NACL_MOLAR_MASS) * salinity / ((1.0 - salinity)/density + salinity/NACL_DENSITY)
    return molarity / 1000.0


def molarity_to_salinity(molarity: float, density: float) -> float:
    """Convert NaCl molarity (mol/L) back to a mass fraction; inverse of ``salinity_to_molarity``."""
    return 1000.0*NACL_MOLAR_MASS*NACL_DENSITY*molarity / (
        density*NACL_DENSITY + 1000.0*NACL_MOLAR_MASS*molarity*(NACL_DENSITY - density)
    )


def polarization_factor(mass_flux: float, density: float, mass_transfer_coef: float) -> float:
    """Film-theory polarization factor exp(J/(ρ·k_m)); >1 for flux leaving the feed."""
    return math.exp(mass_flux / (density*mass_transfer_coef))


def salt_water_concentration(mass_transfer_coef: float,
                             temperature: float,
                             salinity: float,
                             mass_flux: float,
                             density_func: Callable[[float, float], float] = salt_water_density) -> float:
    """Compute the salinity at the membrane wall from the bulk salinity.

    Args:
        mass_transfer_coef: Feed channel mass transfer coefficient (m/s)
        temperature: Bulk temperature (°C)
        salinity: Bulk salt mass fraction (dimensionless)
        mass_flux: Water mass flux, positive from feed toward the membrane (kg/m²/s)
        density_func: Callable (temperature °C, gauge pressure Pa) -> density (kg/m³).
            Evaluated at zero gauge pressure.

    Returns:
        Interfacial salt mass fraction (dimensionless)

    Note:
        With ``mass_flux = 0`` the bulk salinity is returned (up to rounding).
    """
    density = density_func(temperature, 0.0)
    molarity = salinity_to_molarity(salinity, density)
    concentration = molarity * polarization_factor(mass_flux, density, mass_transfer_coef)
    return molarity_to_salinity(concentration, density)
