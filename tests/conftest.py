import pytest

from membrane_distillation.agmd.parameters import (
    AirGapParameters,
    ChannelGeometry,
    MembraneParameters,
    SaltWaterProperties,
)


def make_water(**changes):
    values = dict(
        density=1000.0,
        dyn_viscosity=4.7e-4,
        thermal_conductivity=0.65,
        specific_heat=4180.0,
        mass_diffusivity=2.5e-9,
        prandtl=3.0,
        schmidt=190.0,
    )
    values.update(changes)
    return SaltWaterProperties(**values)


@pytest.fixture
def water():
    return make_water()


@pytest.fixture
def channel():
    return ChannelGeometry(height=2.0e-3, width=0.45, number_channels=6, spacer_porosity=0.85)


@pytest.fixture
def membrane():
    return MembraneParameters(porosity=0.8, tortuosity=1.5, thickness=1.0e-4,
                              pore_diameter=0.2e-6, polymer_conductivity=0.25)


@pytest.fixture
def air_gap():
    return AirGapParameters(thickness=2.0e-3, spacer_porosity=0.75, spacer_conductivity=0.16,
                            plate_thickness=1.0e-4, plate_conductivity=0.4)
