"""Immutable value types shared by the AGMD closures and the segment balance.

Property structs are produced fresh for every closure evaluation and never
cached; design parameters are fixed per module; ``OperatingState`` is a
snapshot that the outer solver replaces (``dataclasses.replace``) rather than
mutates, so concurrent segment evaluations never alias state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .validation import (
    check_air_gap,
    check_channel_geometry,
    check_fraction,
    check_membrane_parameters,
    check_positive,
    check_salt_water_properties,
    check_temperature,
    check_vacuum_pressure,
)


INTERFACE_FIELDS = (
    "feed_wall_temperature",
    "gap_wall_temperature",
    "film_temperature",
    "feed_membrane_pressure",
    "film_boundary_pressure",
    "interfacial_salinity",
)


@dataclass(frozen=True, slots=True)
class SaltWaterProperties:
    density: float               # kg/m³
    dyn_viscosity: float         # Pa·s
    thermal_conductivity: float  # W/m/K
    specific_heat: float         # J/kg/K
    mass_diffusivity: float      # m²/s (NaCl in water)
    prandtl: float
    schmidt: float

    def validate(self) -> SaltWaterProperties:
        check_salt_water_properties(self)
        return self


@dataclass(frozen=True, slots=True)
class MoistAirProperties:
    thermal_conductivity: float  # W/m/K

    def validate(self) -> MoistAirProperties:
        check_positive("moist air thermal conductivity", self.thermal_conductivity)
        return self


@dataclass(frozen=True, slots=True)
class ChannelGeometry:
    """
    Spacer-filled rectangular flow channel(s).
    height: channel height, also the characteristic length of Re/Nu/Sh [m]
    width: channel width [m]
    number_channels: parallel channels sharing the flow
    spacer_porosity: free fraction of the cross-section, in (0, 1]
    """
    height: float
    width: float
    number_channels: int
    spacer_porosity: float

    def validate(self) -> ChannelGeometry:
        check_channel_geometry(self)
        return self


@dataclass(frozen=True, slots=True)
class MembraneParameters:
    porosity: float              # (0, 1)
    tortuosity: float            # >= 1
    thickness: float             # m
    pore_diameter: float         # m
    polymer_conductivity: float  # W/m/K

    def validate(self) -> MembraneParameters:
        check_membrane_parameters(self)
        return self


@dataclass(frozen=True, slots=True)
class AirGapParameters:
    """
    Air gap between membrane and condensing plate.
    thickness: gap thickness [m]
    spacer_porosity: free fraction of the gap spacer, in (0, 1]
    spacer_conductivity: gap spacer polymer conductivity [W/m/K]
    plate_thickness / plate_conductivity: condensing wall between gap and coolant
    """
    thickness: float
    spacer_porosity: float
    spacer_conductivity: float
    plate_thickness: float
    plate_conductivity: float

    def validate(self) -> AirGapParameters:
        check_air_gap(self)
        return self


@dataclass(frozen=True, slots=True)
class OperatingState:
    """
    Local operating point of one channel segment.
    Bulk quantities are set by the caller; interface quantities (feed/membrane,
    membrane/gap and condensate film temperatures, vapor pressures, interfacial
    salinity) are filled in by the outer solver with ``with_interface`` at
    every iteration.
    Temperatures in °C, pressures in Pa (vacuum_pressure is gauge), salinity
    as mass fraction.
    """
    feed_mass_flow_rate: float
    cool_mass_flow_rate: float
    feed_temperature: float
    cool_temperature: float
    feed_salinity: float
    cool_salinity: float
    vacuum_pressure: float
    feed_wall_temperature: Optional[float] = None
    gap_wall_temperature: Optional[float] = None
    film_temperature: Optional[float] = None
    feed_membrane_pressure: Optional[float] = None
    film_boundary_pressure: Optional[float] = None
    interfacial_salinity: Optional[float] = None

    def with_interface(self, **changes) -> OperatingState:
        unknown = set(changes) - set(INTERFACE_FIELDS)
        if unknown:
            raise TypeError(f"with_interface() only sets interface fields, got {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def validate(self) -> OperatingState:
        check_positive("feed mass flow rate", self.feed_mass_flow_rate)
        check_positive("coolant mass flow rate", self.cool_mass_flow_rate)
        check_temperature("feed temperature", self.feed_temperature, liquid=True)
        check_temperature("coolant temperature", self.cool_temperature, liquid=True)
        check_fraction("feed salinity", self.feed_salinity, include_zero=True)
        check_fraction("coolant salinity", self.cool_salinity, include_zero=True)
        check_vacuum_pressure("vacuum pressure", self.vacuum_pressure)
        return self


@dataclass(frozen=True, slots=True)
class FluxResult:
    mass_flux: float  # kg/m²/s, positive from feed toward the air gap
    heat_flux: float  # W/m², latent + conductive through the membrane
