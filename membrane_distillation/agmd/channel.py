"""Convective heat and mass transfer in spacer-filled rectangular channels.

Empirical correlation for the Nusselt and Sherwood numbers in the feed and
coolant channels of a spiral-wound AGMD module, with a wall-property
correction on the Prandtl/Schmidt number.

Module Summary:
- Functions:
    - ``mass_velocity(mass_flow_rate, channel_height, channel_width, number_channels, spacer_porosity)``:
        Mass flow per unit free cross-section.
    - ``channel_reynolds(bulk_water_prop, ...)``: Channel Reynolds number based on channel height.
    - ``channel_correlation(reynolds, bulk, wall)``: Shared Nu/Sh correlation.
    - ``channel_heat_transf_coef(...)``: Convective heat transfer coefficient (W/m²/K).
    - ``channel_mass_transf_coef(...)``: Convective mass transfer coefficient (m/s).

Reference:
    I. Hitsov, K. De Sitter, C. Dotremont, P. Cauwenberg, I. Nopens, Full-scale
    validated Air Gap Membrane Distillation (AGMD) model without calibration
    parameters. J. Membrane Sci. 533 (2017) 309-320.
"""

from ..dimensionless import Re, wall_correction
from .constants import (
    CHANNEL_COEFFICIENT,
    CHANNEL_PRANDTL_EXPONENT,
    CHANNEL_REYNOLDS_EXPONENT,
    CHANNEL_WALL_EXPONENT,
)
from .parameters import SaltWaterProperties


def mass_velocity(mass_flow_rate: float, channel_height: float, channel_width: float,
                  number_channels: int, spacer_porosity: float) -> float:
    """Mass velocity G = ṁ / (N·H·W·ε) in kg/m²/s."""
    return mass_flow_rate / (number_channels * channel_height * channel_width * spacer_porosity)


def channel_reynolds(bulk_water_prop: SaltWaterProperties,
                     mass_flow_rate: float,
                     channel_height: float,
                     channel_width: float,
                     number_channels: int,
                     spacer_porosity: float) -> float:
    """Reynolds number Re = G·H/μ_bulk with the channel height as length scale."""
    G = mass_velocity(mass_flow_rate, channel_height, channel_width, number_channels, spacer_porosity)
    return Re(G, channel_height, bulk_water_prop.dyn_viscosity)


def channel_correlation(reynolds: float, bulk: float, wall: float) -> float:
    """Evaluate 0.22 · Re^0.69 · X^0.13 · (X/X_wall)^0.25.

    Args:
        reynolds: Channel Reynolds number (dimensionless)
        bulk: Prandtl (heat) or Schmidt (mass) number at bulk conditions
        wall: Same number evaluated at wall conditions

    Returns:
        Nusselt or Sherwood number (dimensionless)
    """
    number = CHANNEL_COEFFICIENT * reynolds**CHANNEL_REYNOLDS_EXPONENT * bulk**CHANNEL_PRANDTL_EXPONENT
    return number * wall_correction(bulk, wall, CHANNEL_WALL_EXPONENT)


def channel_heat_transf_coef(bulk_water_prop: SaltWaterProperties,
                             wall_water_prop: SaltWaterProperties,
                             mass_flow_rate: float,
                             channel_height: float,
                             channel_width: float,
                             number_channels: int,
                             spacer_porosity: float) -> float:
    """Compute the convective heat transfer coefficient of a spacer-filled channel.

    Nu = 0.22 · Re^0.69 · Pr^0.13 · (Pr/Pr_wall)^0.25 and h = k·Nu/H.

    Args:
        bulk_water_prop: Salt water properties at bulk temperature/salinity
        wall_water_prop: Salt water properties at wall temperature/salinity
        mass_flow_rate: Total mass flow rate through the channels (kg/s)
        channel_height: Channel height (m)
        channel_width: Channel width (m)
        number_channels: Number of parallel channels
        spacer_porosity: Spacer porosity (dimensionless, 0 < ε <= 1)

    Returns:
        Heat transfer coefficient (W/m²/K)

    Note:
        Non-positive flow rates or geometry give NaN/negative results; use
        ``validation.check_channel_inputs`` upstream for strict checking.
    """
    reynolds = channel_reynolds(bulk_water_prop, mass_flow_rate, channel_height, channel_width,
                                number_channels, spacer_porosity)
    nusselt = channel_correlation(reynolds, bulk_water_prop.prandtl, wall_water_prop.prandtl)
    return bulk_water_prop.thermal_conductivity * nusselt / channel_height


def channel_mass_transf_coef(bulk_water_prop: SaltWaterProperties,
                             wall_water_prop: SaltWaterProperties,
                             mass_flow_rate: float,
                             channel_height: float,
                             channel_width: float,
                             number_channels: int,
                             spacer_porosity: float) -> float:
    """Compute the convective mass transfer coefficient of a spacer-filled channel.

    Sh = 0.22 · Re^0.69 · Sc^0.13 · (Sc/Sc_wall)^0.25 and k_m = D·Sh/H.

    Args:
        bulk_water_prop: Salt water properties at bulk temperature/salinity
        wall_water_prop: Salt water properties at wall temperature/salinity
        mass_flow_rate: Total mass flow rate through the channels (kg/s)
        channel_height: Channel height (m)
        channel_width: Channel width (m)
        number_channels: Number of parallel channels
        spacer_porosity: Spacer porosity (dimensionless, 0 < ε <= 1)

    Returns:
        Mass transfer coefficient (m/s)
    """
    reynolds = channel_reynolds(bulk_water_prop, mass_flow_rate, channel_height, channel_width,
                                number_channels, spacer_porosity)
    sherwood = channel_correlation(reynolds, bulk_water_prop.schmidt, wall_water_prop.schmidt)
    return bulk_water_prop.mass_diffusivity * sherwood / channel_height
