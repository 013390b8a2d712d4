"""Boundary validation for the AGMD closure model.

The closures in ``channel``, ``membrane``, ``polarization`` and ``flux`` are
plain arithmetic and let NaN/Inf propagate for out-of-domain inputs. Callers
that want strict behavior run these checks first; every check raises
``InvalidPhysicalInput`` naming the offending quantity.

Module Summary:
- Classes:
    - ``InvalidPhysicalInput``: ValueError subclass raised for out-of-domain inputs.
- Functions:
    - ``check_positive(name, value)``, ``check_fraction(name, value, ...)``,
      ``check_temperature(name, value)``: scalar checks.
    - ``check_channel_geometry(geometry)``, ``check_membrane_parameters(membrane)``,
      ``check_air_gap(air_gap)``, ``check_salt_water_properties(props)``: value type checks.
    - ``check_channel_inputs(...)``, ``check_flux_inputs(...)``: argument sets of the closures.
"""

import math

from .constants import ATM_PRESSURE

# Liquid-water range covered by the seawater property correlations (°C)
MIN_LIQUID_TEMPERATURE = 0.0
MAX_LIQUID_TEMPERATURE = 120.0


class InvalidPhysicalInput(ValueError):
    """Raised when an input lies outside its physically valid domain."""

    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name}={value!r}: {reason}")


def _check_finite(name: str, value) -> None:
    try:
        finite = math.isfinite(value)
    except TypeError:
        raise InvalidPhysicalInput(name, value, "must be a real number") from None
    if not finite:
        raise InvalidPhysicalInput(name, value, "must be finite")


def check_positive(name: str, value) -> None:
    """Require ``value`` to be a finite number strictly greater than zero."""
    _check_finite(name, value)
    if value <= 0.0:
        raise InvalidPhysicalInput(name, value, "must be strictly positive")


def check_fraction(name: str, value, include_zero: bool = False, include_one: bool = False) -> None:
    """Require ``value`` to lie in the unit interval, open or closed at each end."""
    _check_finite(name, value)
    low_ok = value >= 0.0 if include_zero else value > 0.0
    high_ok = value <= 1.0 if include_one else value < 1.0
    if not (low_ok and high_ok):
        interval = f"{'[' if include_zero else '('}0, 1{']' if include_one else ')'}"
        raise InvalidPhysicalInput(name, value, f"must lie in {interval}")


def check_temperature(name: str, value, liquid: bool = False) -> None:
    """Require a Celsius temperature above absolute zero, or in the liquid range."""
    _check_finite(name, value)
    if value <= -273.15:
        raise InvalidPhysicalInput(name, value, "is below absolute zero (°C expected)")
    if liquid and not (MIN_LIQUID_TEMPERATURE <= value <= MAX_LIQUID_TEMPERATURE):
        raise InvalidPhysicalInput(
            name, value,
            f"must lie in the liquid-water range [{MIN_LIQUID_TEMPERATURE}, {MAX_LIQUID_TEMPERATURE}] °C",
        )


def check_vacuum_pressure(name: str, value) -> None:
    """Require a gauge pressure that leaves a positive absolute pressure."""
    _check_finite(name, value)
    if ATM_PRESSURE + value <= 0.0:
        raise InvalidPhysicalInput(name, value, "absolute pressure ATM_PRESSURE + value must be positive")


def check_channel_geometry(geometry) -> None:
    check_positive("channel height", geometry.height)
    check_positive("channel width", geometry.width)
    _check_finite("number of channels", geometry.number_channels)
    if int(geometry.number_channels) != geometry.number_channels or geometry.number_channels < 1:
        raise InvalidPhysicalInput("number of channels", geometry.number_channels, "must be a positive integer")
    check_fraction("spacer porosity", geometry.spacer_porosity, include_one=True)


def check_membrane_parameters(membrane) -> None:
    check_fraction("membrane porosity", membrane.porosity)
    _check_finite("membrane tortuosity", membrane.tortuosity)
    if membrane.tortuosity < 1.0:
        raise InvalidPhysicalInput("membrane tortuosity", membrane.tortuosity, "must be >= 1")
    check_positive("membrane thickness", membrane.thickness)
    check_positive("pore diameter", membrane.pore_diameter)
    check_positive("polymer conductivity", membrane.polymer_conductivity)


def check_air_gap(air_gap) -> None:
    check_positive("air gap thickness", air_gap.thickness)
    check_fraction("gap spacer porosity", air_gap.spacer_porosity, include_one=True)
    check_positive("gap spacer conductivity", air_gap.spacer_conductivity)
    check_positive("plate thickness", air_gap.plate_thickness)
    check_positive("plate conductivity", air_gap.plate_conductivity)


def check_salt_water_properties(props) -> None:
    for field in ("density", "dyn_viscosity", "thermal_conductivity", "specific_heat",
                  "mass_diffusivity", "prandtl", "schmidt"):
        check_positive(f"salt water {field.replace('_', ' ')}", getattr(props, field))


def check_channel_inputs(bulk_water_prop, wall_water_prop, mass_flow_rate: float, geometry) -> None:
    """Validate the arguments of the channel heat/mass transfer correlations."""
    check_salt_water_properties(bulk_water_prop)
    check_salt_water_properties(wall_water_prop)
    check_positive("mass flow rate", mass_flow_rate)
    check_channel_geometry(geometry)


def check_flux_inputs(
        membrane,
        air_gap_thickness: float,
        temperature_membrane: float,
        temperature_gap: float,
        feed_membrane_pressure: float,
        film_boundary_pressure: float,
        vacuum_pressure: float,
) -> None:
    """Validate the arguments of the flux closure (temperatures in °C)."""
    check_membrane_parameters(membrane)
    check_positive("air gap thickness", air_gap_thickness)
    check_temperature("membrane temperature", temperature_membrane)
    check_temperature("gap temperature", temperature_gap)
    check_positive("feed membrane vapor pressure", feed_membrane_pressure)
    check_positive("film boundary vapor pressure", film_boundary_pressure)
    check_vacuum_pressure("vacuum pressure", vacuum_pressure)
