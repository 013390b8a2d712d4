"""YAML configuration of AGMD module designs.

A design file is a YAML mapping with ``feed_channel``, ``coolant_channel``,
``membrane`` and ``air_gap`` sections plus module-level operating values.
Any subset may be given; missing values fall back to ``DEFAULT_DESIGN``.

Example design file::

    vacuum_pressure: -81325.0
    feed_mass_flow_rate: 0.0833
    membrane:
      porosity: 0.8
      pore_diameter: 2.0e-7
    air_gap:
      thickness: 0.002
"""

import copy
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .parameters import AirGapParameters, ChannelGeometry, MembraneParameters, OperatingState
from .validation import InvalidPhysicalInput, check_positive, check_vacuum_pressure

# Reference run: 12.96 m² module, 6 channels, 1/12 kg/s on both sides
DEFAULT_DESIGN: Dict[str, Any] = {
    "membrane_area": 12.96,
    "vacuum_pressure": -81325.0,
    "feed_mass_flow_rate": 1.0/12.0,
    "cool_mass_flow_rate": 1.0/12.0,
    "feed_channel": {
        "height": 2.0e-3,
        "width": 0.45,
        "number_channels": 6,
        "spacer_porosity": 0.85,
    },
    "coolant_channel": {
        "height": 2.0e-3,
        "width": 0.45,
        "number_channels": 6,
        "spacer_porosity": 0.85,
    },
    "membrane": {
        "porosity": 0.8,
        "tortuosity": 1.5,
        "thickness": 1.0e-4,
        "pore_diameter": 2.0e-7,
        "polymer_conductivity": 0.25,
    },
    "air_gap": {
        "thickness": 2.0e-3,
        "spacer_porosity": 0.75,
        "spacer_conductivity": 0.16,
        "plate_thickness": 1.0e-4,
        "plate_conductivity": 0.4,
    },
}

_SECTIONS = {
    "feed_channel": ChannelGeometry,
    "coolant_channel": ChannelGeometry,
    "membrane": MembraneParameters,
    "air_gap": AirGapParameters,
}


@dataclass(frozen=True, slots=True)
class ModuleDesign:
    """
    Complete AGMD module design. ``membrane_area`` (m²) scales the segment
    mass flux to the module distillate rate in ``sweep_segment_flux``.
    """
    feed_channel: ChannelGeometry
    coolant_channel: ChannelGeometry
    membrane: MembraneParameters
    air_gap: AirGapParameters
    membrane_area: float
    vacuum_pressure: float
    feed_mass_flow_rate: float
    cool_mass_flow_rate: float

    def validate(self) -> "ModuleDesign":
        self.feed_channel.validate()
        self.coolant_channel.validate()
        self.membrane.validate()
        self.air_gap.validate()
        check_positive("membrane area", self.membrane_area)
        check_positive("feed mass flow rate", self.feed_mass_flow_rate)
        check_positive("coolant mass flow rate", self.cool_mass_flow_rate)
        check_vacuum_pressure("vacuum pressure", self.vacuum_pressure)
        return self

    def operating_state(self,
                        feed_temperature: float,
                        cool_temperature: float,
                        feed_salinity: float,
                        cool_salinity: Optional[float] = None,
                        **changes) -> OperatingState:
        """Bulk operating state at this design's flow rates and vacuum.

        The coolant salinity defaults to the feed salinity (the feed is
        preheated in the coolant channel). Keyword ``changes`` override any
        other ``OperatingState`` field.
        """
        values = dict(
            feed_mass_flow_rate=self.feed_mass_flow_rate,
            cool_mass_flow_rate=self.cool_mass_flow_rate,
            feed_temperature=feed_temperature,
            cool_temperature=cool_temperature,
            feed_salinity=feed_salinity,
            cool_salinity=feed_salinity if cool_salinity is None else cool_salinity,
            vacuum_pressure=self.vacuum_pressure,
        )
        values.update(changes)
        return OperatingState(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _merge(base: Dict[str, Any], updates: Mapping[str, Any], path: str = "") -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in updates.items():
        where = f"{path}{key}"
        if key not in base:
            raise InvalidPhysicalInput(where, value, "unknown design key")
        if isinstance(base[key], dict):
            if not isinstance(value, Mapping):
                raise InvalidPhysicalInput(where, value, "expected a mapping")
            merged[key] = _merge(base[key], value, f"{where}.")
        else:
            merged[key] = value
    return merged


def _as_float(name: str, value) -> float:
    if isinstance(value, bool):
        raise InvalidPhysicalInput(name, value, "must be a real number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidPhysicalInput(name, value, "must be a real number") from None


def design_from_dict(data: Mapping[str, Any]) -> ModuleDesign:
    """Build and validate a ``ModuleDesign`` from a (partial) mapping."""
    merged = _merge(DEFAULT_DESIGN, data)
    sections = {name: cls(**merged[name]) for name, cls in _SECTIONS.items()}
    scalars = {k: _as_float(k, v) for k, v in merged.items() if k not in _SECTIONS}
    return ModuleDesign(**sections, **scalars).validate()


def load_design(path: Optional[Union[str, Path]] = None,
                overrides: Optional[Mapping[str, Any]] = None) -> ModuleDesign:
    """Load a module design from YAML, merged over ``DEFAULT_DESIGN``.

    Args:
        path: YAML design file; None uses the defaults only
        overrides: Mapping applied on top of the file contents

    Returns:
        Validated ModuleDesign

    Raises:
        FileNotFoundError: If ``path`` does not exist
        InvalidPhysicalInput: For unknown keys or out-of-domain values
    """
    data: Dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Design file {path} not found.")
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    if overrides:
        data = _merge(_merge(DEFAULT_DESIGN, data), overrides)
    return design_from_dict(data)


def save_design(design: ModuleDesign, path: Union[str, Path]) -> Path:
    """Write a design to a YAML file and return its path."""
    path = Path(path)
    with open(path, "w") as f:
        yaml.safe_dump(design.to_dict(), f, sort_keys=False)
    return path
